"""
Sitemap and robots.txt endpoints served from the site root.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response
from noticeboard.services.sitemap import SitemapService, render_robots_txt
from noticeboard.utils.dependencies import get_sitemap_service


router = APIRouter(tags=["Sitemaps"])

XML_MEDIA_TYPE = "application/xml"


async def _sitemap_response(service: SitemapService, section: str) -> Response:
    return Response(content=await service.render(section), media_type=XML_MEDIA_TYPE)


@router.get("/categories-sitemap.xml", response_class=Response, summary="Categories sitemap")
async def categories_sitemap(sitemap_service: SitemapService = Depends(get_sitemap_service)) -> Response:
    return await _sitemap_response(sitemap_service, "categories")


@router.get("/faqs-sitemap.xml", response_class=Response, summary="Published FAQs sitemap")
async def faqs_sitemap(sitemap_service: SitemapService = Depends(get_sitemap_service)) -> Response:
    return await _sitemap_response(sitemap_service, "faqs")


@router.get("/knowledge-base-sitemap.xml", response_class=Response, summary="Published knowledge base sitemap")
async def knowledge_base_sitemap(sitemap_service: SitemapService = Depends(get_sitemap_service)) -> Response:
    return await _sitemap_response(sitemap_service, "knowledge-base")


@router.get("/properties-sitemap.xml", response_class=Response, summary="Approved properties sitemap")
async def properties_sitemap(sitemap_service: SitemapService = Depends(get_sitemap_service)) -> Response:
    return await _sitemap_response(sitemap_service, "properties")


@router.get("/robots.txt", response_class=PlainTextResponse, summary="Crawler policy")
async def robots_txt() -> PlainTextResponse:
    return PlainTextResponse(render_robots_txt())
