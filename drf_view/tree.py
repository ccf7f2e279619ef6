"""
Tencent is pleased to support the open source community by making 蓝鲸智云 - 监控平台 (BlueKing - Monitor) available.
Copyright (C) 2017-2021 THL A29 Limited, a Tencent company. All rights reserved.
Licensed under the MIT License (the "License"); you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://opensource.org/licenses/MIT
Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on
an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the
specific language governing permissions and limitations under the License.
"""

"""
XML 树构建器

将任意嵌套的映射、序列转换为 XML 文档：

    TreeBuilder().render({"user": {"id": 5, "active": True}})
    # <?xml version='1.0' encoding='utf-8'?>
    # <response><user><id>5</id><active>true</active></user></response>

节点命名规则
--------
- 普通键直接作为标签名；
- 数字键（如序列下标）不能作为 XML 标签名，改用集合标签名，并通过 key 属性
  保留原始键，序列因此可以无损地还原顺序；
- 集合标签名按父节点的键在 collection_names 中查找，未登记时为 "entry"；
  与集合标签名同名的普通键同样带上 key 属性。

    TreeBuilder(collection_names={"tags": "tag"}).render({"tags": ["a", "b"]})
    # <response><tags><tag key="0">a</tag><tag key="1">b</tag></tags></response>

叶子节点
--------
- 布尔值与 None 输出为 "true" / "false" / "null"；
- 日期时间输出为 ISO-8601 文本；
- 字符串、数字输出其文本形式；
- 已构建的文档对象整体拼接到当前节点下；
- 其他无法转换的对象降级为空节点，不会导致整个文档失败。
"""

import copy
import datetime
import decimal
import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from lxml import etree

from drf_view.convertible import DictConvertible
from drf_view.exceptions import MalformedInput, UnsupportedValueType

logger = logging.getLogger(__name__)

DEFAULT_ROOT_TAG = "response"
DEFAULT_ENTRY_TAG = "entry"

NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_SCALAR_TYPES = (str, int, float, decimal.Decimal)
_DATE_TYPES = (datetime.datetime, datetime.date, datetime.time)
_STRING_TYPES = (str, bytes, bytearray)


def is_numeric(key: Any) -> bool:
    """数字或数字字符串（如 3、"3"、"1.5"、"1e3"）"""
    if isinstance(key, (int, float, decimal.Decimal)):
        return True
    return isinstance(key, str) and NUMERIC_PATTERN.match(key) is not None


def is_document(value: Any) -> bool:
    return isinstance(value, etree._ElementTree) or etree.iselement(value)


def is_container(value: Any) -> bool:
    """映射或非字符串的可迭代对象"""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Iterable) and not isinstance(value, _STRING_TYPES)


class TreeBuilder:
    """
    XML 树构建器

    Attributes:
        root_tag: 由映射或序列构建文档时使用的根节点标签名
        default_entry_tag: 默认集合标签名
        collection_names: 父节点键 -> 集合标签名
    """

    def __init__(
        self,
        root_tag: str = DEFAULT_ROOT_TAG,
        default_entry_tag: str = DEFAULT_ENTRY_TAG,
        collection_names: Mapping | None = None,
    ):
        self.root_tag = root_tag
        self.default_entry_tag = default_entry_tag
        self.collection_names = dict(collection_names or {})

    def render(self, data: Any) -> str:
        """
        构建文档并序列化为带 XML 声明的文本

        Raises:
            MalformedInput: data 为无法解析的 XML 文本
            UnsupportedValueType: data 的类型无法转换为文档
        """
        tree = self.build(data)
        return etree.tostring(tree, xml_declaration=True, encoding="utf-8").decode("utf-8")

    def build(self, data: Any) -> etree._ElementTree:
        """
        根据顶层参数构建文档

        - 已构建的文档原样返回，不再包裹根节点；
        - 非空 XML 文本解析后返回；
        - 映射或序列写入新建的根节点；
        - 其他类型抛出 UnsupportedValueType。
        """
        if isinstance(data, etree._ElementTree):
            return data
        if etree.iselement(data):
            return etree.ElementTree(copy.deepcopy(data))
        if isinstance(data, _STRING_TYPES) and data:
            return self.parse(data)
        if is_container(data):
            root = etree.Element(self.root_tag)
            self.append(data, root)
            return etree.ElementTree(root)

        raise UnsupportedValueType(value_type=type(data).__name__)

    def parse(self, text: str | bytes) -> etree._ElementTree:
        if isinstance(text, str):
            text = text.encode("utf-8")
        # 禁止实体展开与网络访问
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = etree.fromstring(bytes(text), parser)
        except etree.XMLSyntaxError as error:
            raise MalformedInput(reason=str(error), cause=error) from error
        return root.getroottree()

    def append(self, data: Any, parent: etree._Element, parent_key: Any = None):
        """
        将映射或序列的每一项按迭代顺序追加为 parent 的子节点

        Args:
            data: 映射或序列
            parent: 父节点
            parent_key: 父节点对应的原始键，用于查找集合标签名
        """
        entry_tag = self.collection_names.get(parent_key, self.default_entry_tag)

        for source_key, value in self.iter_items(data):
            if isinstance(source_key, bool):
                source_key = int(source_key)
            if is_numeric(source_key) or source_key == entry_tag:
                tag = entry_tag
            else:
                tag = str(source_key)

            try:
                element = etree.Element(tag)
            except ValueError:
                logger.warning("[TreeBuilder] skip key %r: invalid XML tag name", source_key)
                continue

            if tag == entry_tag:
                element.set("key", str(source_key))

            self.fill(element, value, source_key)
            parent.append(element)

    def fill(self, element: etree._Element, value: Any, source_key: Any):
        """根据值的类型填充节点：拼接文档、递归子节点或写入文本"""
        if is_document(value):
            root = value.getroot() if isinstance(value, etree._ElementTree) else value
            element.append(copy.deepcopy(root))
        elif isinstance(value, DictConvertible):
            self.append(value.to_dict(), element, source_key)
        elif is_container(value):
            self.append(value, element, source_key)
        else:
            try:
                element.text = self.leaf_text(value)
            except ValueError as error:
                # 控制字符、NULL 字节等无法写入 XML 文本
                raise MalformedInput(reason=f"key {source_key!r}: {error}", cause=error) from error

    @staticmethod
    def iter_items(data: Any):
        if isinstance(data, Mapping):
            return data.items()
        return enumerate(data)

    @staticmethod
    def leaf_text(value: Any) -> str | None:
        """叶子节点文本，无法转换的对象返回 None（空节点）"""
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, _DATE_TYPES):
            return value.isoformat()
        if isinstance(value, _SCALAR_TYPES):
            return str(value)
        return None
