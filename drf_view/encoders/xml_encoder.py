"""
DRF-View XML 编码器
"""

from collections.abc import Mapping
from typing import Any

from drf_view.settings import view_settings
from drf_view.tree import TreeBuilder

from .base import BaseEncoder


class XMLEncoder(BaseEncoder):
    """
    XML 编码器

    未显式传入的构建参数取自 DRF_VIEW 配置：
        XML_ROOT_TAG、XML_DEFAULT_ENTRY_TAG、XML_COLLECTION_NAMES
    """

    format = "xml"
    media_type = "application/xml"

    tree_builder_class = TreeBuilder

    def __init__(
        self,
        root_tag: str | None = None,
        default_entry_tag: str | None = None,
        collection_names: Mapping | None = None,
    ):
        if collection_names is None:
            collection_names = view_settings.XML_COLLECTION_NAMES
        self.tree_builder = self.tree_builder_class(
            root_tag=root_tag or view_settings.XML_ROOT_TAG,
            default_entry_tag=default_entry_tag or view_settings.XML_DEFAULT_ENTRY_TAG,
            collection_names=collection_names,
        )

    def encode(self, data: Any) -> str:
        return self.tree_builder.render(data)
