# estates/services/sitemap.py
from typing import Iterable, List
from xml.etree import ElementTree as ET

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
STATIC_PAGES = ("", "about.html", "contact.html", "properties.html")
CHANGEFREQ = "weekly"
PRIORITY = "0.8"


def sitemap_urls(site_url: str, property_ids: Iterable[str]) -> List[str]:
    site = site_url.rstrip("/")
    urls = [f"{site}/{page}" for page in STATIC_PAGES]
    urls.extend(f"{site}/property-details.html?id={pid}" for pid in property_ids)
    return urls


def render_sitemap(urls: Iterable[str]) -> str:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for loc in urls:
        entry = ET.SubElement(urlset, "url")
        ET.SubElement(entry, "loc").text = loc
        ET.SubElement(entry, "changefreq").text = CHANGEFREQ
        ET.SubElement(entry, "priority").text = PRIORITY
    ET.indent(urlset)
    body = ET.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
