"""
模板引用与模板引擎

模板引用既可以是结构化的 TemplateReference，也可以是一个已经拼好的模板名字符串。
format 与 engine 允许在设置模板时留空，在读取时由 resolve_template 按视图当前状态补全，
因为设置模板时请求格式往往还没有确定。
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from django.template.loader import render_to_string

from drf_view.exceptions import InvalidInput

TEMPLATE_FIELDS = ("name", "bundle", "controller", "format", "engine")


@dataclasses.dataclass(frozen=True)
class TemplateReference:
    """
    结构化模板引用

    Attributes:
        name: 模板名（必填）
        bundle: 应用名，对应模板目录的第一层
        controller: 控制器名，对应模板目录的第二层
        format: 模板格式，如 html
        engine: Django 模板引擎别名，如 django / jinja2
    """

    name: str
    bundle: str = ""
    controller: str = ""
    format: str | None = None
    engine: str | None = None

    @property
    def logical_name(self) -> str:
        """bundle:controller:name.format.engine 形式的逻辑名"""
        return f"{self.bundle}:{self.controller}:{self.name}.{self.format}.{self.engine}"

    @property
    def path(self) -> str:
        """交给 Django 模板加载器的路径，如 blog/post/show.html"""
        filename = f"{self.name}.{self.format}" if self.format else self.name
        return "/".join(part for part in (self.bundle, self.controller, filename) if part)

    def __str__(self) -> str:
        return self.logical_name


def coerce_template(template: Any) -> TemplateReference | str | None:
    """
    将 set_template 接收的值规范化为 TemplateReference 或字符串

    Raises:
        InvalidInput: 缺少模板名或类型不受支持
    """
    if template is None:
        return None

    if isinstance(template, str):
        if not template:
            raise InvalidInput(message="Template name is required", field="name")
        return template

    if isinstance(template, Mapping):
        unknown = set(template) - set(TEMPLATE_FIELDS)
        if unknown:
            raise InvalidInput(
                message=f"Unknown template fields: {', '.join(sorted(map(str, unknown)))}",
                field="template",
            )
        template = TemplateReference(
            name=template.get("name"),
            bundle=template.get("bundle") or "",
            controller=template.get("controller") or "",
            format=template.get("format"),
            engine=template.get("engine"),
        )

    if not isinstance(template, TemplateReference):
        raise InvalidInput(
            message=f"Unsupported template reference type {type(template).__name__}",
            field="template",
        )

    if not template.name:
        raise InvalidInput(message="Template name is required", field="name")

    return template


def resolve_template(
    template: TemplateReference | str | None,
    format: str | None,
    engine: str | None,
) -> TemplateReference | str | None:
    """
    补全模板引用中缺失的 format 与 engine，返回新的引用，不修改入参

    字符串形式的模板名原样返回。
    """
    if not isinstance(template, TemplateReference):
        return template

    return dataclasses.replace(
        template,
        format=template.format or format,
        engine=template.engine or engine,
    )


class DjangoTemplating:
    """
    基于 Django 模板系统的模板引擎

    TemplateReference 通过 path 查找模板并使用其 engine 指定的引擎渲染，
    字符串模板名交给全部已配置的引擎查找。
    """

    def render(self, template: TemplateReference | str, parameters: Mapping) -> str:
        if isinstance(template, TemplateReference):
            return render_to_string(template.path, parameters, using=template.engine)
        return render_to_string(template, parameters)
