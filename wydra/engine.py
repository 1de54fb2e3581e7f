"""
Движок шорткодов Wydra.

Объект Wydra владеет реестром шорткодов, стеком экземпляров рендеринга и
хранилищем данных; хост передаёт в него найденные шорткоды через точки
входа dispatch_*. Рекурсия происходит только через host.expand_markers,
вызываемый из content().

Один объект Wydra обслуживает один проход рендеринга: стек не рассчитан
на параллельные запросы. Реестр можно разделять между объектами.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from .config import WydraConfig, load_config, template_dirs
from .data import DataStore, array_path, parse_yaml
from .errors import TemplateRenderError
from .host import ExpansionHost
from .instance import AttrKey, InstanceStack, RenderInstance
from .registry import HandlerKind, MarkerRegistry
from .rendering import TemplateRenderer
from .scanner import scan_templates

logger = logging.getLogger(__name__)

# Атрибут шаблонного шорткода: взять содержимое с другой страницы
SOURCE_PAGE_ATTR = "source-page"
# Атрибут w-define: имя блока данных
DEFINE_NAME_ATTR = "name"
DEFINE_INSTANCE_MARK = "wydra-instance-"


class Wydra:
    """
    Явный контекст движка, передаваемый хостом во все вызовы.
    """

    def __init__(
        self,
        config: WydraConfig,
        host: ExpansionHost,
        *,
        root: Optional[Path] = None,
        registry: Optional[MarkerRegistry] = None,
        store: Optional[DataStore] = None,
    ):
        """
        Args:
            config: Настройки движка
            host: Обратные вызовы хоста (раскрытие, загрузка страниц)
            root: Корень, относительно которого ищутся каталоги шаблонов
            registry: Готовый реестр (иначе строится из config и каталогов)
            store: Хранилище данных (иначе создаётся пустое)
        """
        self.config = config
        self.host = host
        self.root = (root or Path.cwd()).resolve()
        self.template_dirs = template_dirs(self.root, config.template_paths)

        self.registry = registry or self.build_registry(config, self.template_dirs)
        self.stack = InstanceStack()
        self.store = store if store is not None else DataStore(debug=config.debug)
        self.templates = TemplateRenderer(self.template_dirs)

    @classmethod
    def from_root(cls, root: Path, host: ExpansionHost) -> "Wydra":
        """Создаёт движок по конфигурации <root>/wydra.yaml."""
        return cls(load_config(root), host, root=root)

    @staticmethod
    def build_registry(config: WydraConfig, dirs: Sequence[Path]) -> MarkerRegistry:
        records = scan_templates(dirs, config.template_suffix)
        return MarkerRegistry.build(
            element_tags=config.element_tags,
            max_depth=config.max_depth,
            template_records=records,
            prefixes=config.prefixes,
            separator=config.separator,
            depth_overrides=config.depth_overrides,
        )

    # ---- Точки входа для хоста ----

    def dispatch(self, surface_name: str, attrs: Optional[Mapping[AttrKey, str]], content: Optional[str]) -> str:
        """
        Обрабатывает шорткод по его поверхностному имени.

        Неизвестное имя даёт пустую строку.
        """
        code = self.registry.resolve(surface_name)
        if code is None:
            logger.debug("Unknown shortcode '%s'", surface_name)
            return ""

        kind = self.registry.definitions[code].kind
        if kind is HandlerKind.ELEMENT:
            return self.dispatch_element(attrs, content, surface_name)
        elif kind is HandlerKind.TEMPLATE:
            return self.dispatch_template(attrs, content, surface_name)
        elif kind is HandlerKind.DATA_DEFINE:
            return self.dispatch_define(attrs, content)
        return ""

    def dispatch_element(self, attrs: Optional[Mapping[AttrKey, str]], content: Optional[str], surface_name: str) -> str:
        """Рендерит html-подобный шорткод (w-div, w-tag, w-pre …)."""
        tag = self.registry.element_tag_for(surface_name)
        if not tag:
            logger.debug("Shortcode '%s' is not an element", surface_name)
            return ""
        return self._render(tag, attrs, content)

    def dispatch_template(self, attrs: Optional[Mapping[AttrKey, str]], content: Optional[str], surface_name: str) -> str:
        """Рендерит шорткод, объявленный файлом шаблона."""
        template_file = self.registry.template_for(surface_name)
        if template_file is None or not template_file.is_file():
            logger.debug("No template file for shortcode '%s'", surface_name)
            return ""

        if attrs and attrs.get(SOURCE_PAGE_ATTR):
            # содержимое берётся с другой страницы
            content = self.host.fetch_external_content(str(attrs[SOURCE_PAGE_ATTR])) or ""

        try:
            return self._render(str(template_file), attrs, content)
        except TemplateRenderError as e:
            # ошибка шаблона даёт пустой результат, страница рендерится дальше
            logger.warning("Shortcode '%s' rendered empty: %s", surface_name, e, exc_info=self.config.debug)
            return ""

    def dispatch_define(self, attrs: Optional[Mapping[AttrKey, str]], content: Optional[str]) -> str:
        """
        Объявляет именованный блок данных.

        Обычно ничего не выводит; с define_dump_instance выводит маркер с хешем.
        """
        attrs = attrs or {}
        if DEFINE_NAME_ATTR in attrs:
            name = str(attrs[DEFINE_NAME_ATTR])
        else:
            name = self.host.current_page_name() or ""

        key = self.store.define(name, content or "")
        if self.config.define_dump_instance:
            return f"{DEFINE_INSTANCE_MARK}{self.store.get(key).hash} "
        return ""

    # ---- Рендеринг ----

    def _render(self, tag_value: str, attrs: Optional[Mapping[AttrKey, str]], content: Optional[str]) -> str:
        with self.stack.entered(tag_value, attrs, content, self.host.expand_markers) as instance:
            return instance.render(self._run_template)

    def _run_template(self, instance: RenderInstance) -> str:
        return self.templates.render(Path(instance.tag_value), self.template_context(instance))

    def template_context(self, instance: RenderInstance) -> Dict[str, Any]:
        """Имена, доступные внутри файла шаблона."""
        return {
            "instance": instance,
            "attr": self.attr,
            "content": self.content,
            "data": self.data,
            "yaml": self.yaml,
            "array_path": array_path,
            "wap": array_path,
        }

    # ---- API шаблонов ----

    def latest(self) -> RenderInstance:
        """Текущий экземпляр рендеринга (EmptyStackError вне шорткода)."""
        return self.stack.current()

    def attr(self, code: AttrKey, default: Any = None) -> Any:
        return self.latest().attr(code, default)

    def content(self) -> str:
        return self.latest().render_content()

    def data(self, name: str) -> Optional[Any]:
        """Данные блока, объявленного через w-define, по имени или хешу."""
        return self.store.lookup(name)

    def yaml(self) -> Any:
        """Раскрытое содержимое текущего шорткода, разобранное как YAML."""
        return parse_yaml(self.content(), debug=self.config.debug)


__all__ = ["Wydra", "SOURCE_PAGE_ATTR", "DEFINE_INSTANCE_MARK"]
