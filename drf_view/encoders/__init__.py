"""
DRF-View 编码器模块

包含:
    - BaseEncoder: 编码器基类
    - TemplatingAwareEncoder: 需要模板的编码器基类
    - JSONEncoder / ViewJSONEncoder: JSON 编码
    - XMLEncoder: XML 编码
    - HTMLEncoder: 模板渲染
"""

from drf_view.encoders.base import BaseEncoder, TemplatingAwareEncoder
from drf_view.encoders.html_encoder import HTMLEncoder
from drf_view.encoders.json_encoder import JSONEncoder, ViewJSONEncoder
from drf_view.encoders.xml_encoder import XMLEncoder

__all__ = [
    "BaseEncoder",
    "TemplatingAwareEncoder",
    "JSONEncoder",
    "ViewJSONEncoder",
    "XMLEncoder",
    "HTMLEncoder",
]
