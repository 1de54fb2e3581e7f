from pathlib import Path

import pytest

from wydra import Wydra, WydraConfig

# Импорт из унифицированной инфраструктуры
from tests.infrastructure import FakeHost


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    # переменная окружения разработчика не должна влиять на тесты
    monkeypatch.delenv("WYDRA_DEBUG", raising=False)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost(pages={"42": "title: Remote page"}, page_name="about")


@pytest.fixture
def make_engine(tmp_path: Path, host: FakeHost):
    """
    Фабрика движков над tmp_path (шаблоны ищутся в tmp_path/templates).

    Именованные аргументы передаются в WydraConfig.
    """
    def _make(**cfg) -> Wydra:
        engine = Wydra(WydraConfig(**cfg), host, root=tmp_path)
        host.engine = engine
        return engine
    return _make


@pytest.fixture
def engine(make_engine) -> Wydra:
    """Движок с настройками по умолчанию и без шаблонов."""
    return make_engine()
