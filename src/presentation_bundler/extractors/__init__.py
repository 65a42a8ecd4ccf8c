"""Reference extractors for stylesheets, layout markup and configuration."""

from .base import is_data_uri, is_external_url, is_local_reference
from .configuration import ConfigAssetRef, extract_config_assets
from .layout import extract_html_urls, parse_srcset
from .stylesheet import CssUrlRef, extract_css_urls, extract_css_urls_with_lines

__all__ = [
    "ConfigAssetRef",
    "CssUrlRef",
    "extract_config_assets",
    "extract_css_urls",
    "extract_css_urls_with_lines",
    "extract_html_urls",
    "is_data_uri",
    "is_external_url",
    "is_local_reference",
    "parse_srcset",
]
