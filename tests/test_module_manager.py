import pytest

from infra_ingest.lib.aws.base import AWSModule
from infra_ingest.module_manager import module_manager
from infra_ingest.modules.aws.data_ingestion import DataIngestion
from infra_ingest.modules.aws.data_ingestion.config import DataIngestionArgs


def test_data_ingestion_is_discovered():
    lazy_module = module_manager.get_module("aws", "data-ingestion")

    assert lazy_module.name == "data_ingestion"
    assert lazy_module.path == ".modules.aws.data_ingestion"
    assert lazy_module.Module is DataIngestion


def test_unknown_module():
    with pytest.raises(ModuleNotFoundError, match="nope"):
        module_manager.get_module("aws", "nope")


def test_config_type_comes_from_build_hint():
    assert DataIngestion.get_config_type() is DataIngestionArgs


def test_build_without_config_hint():
    class Untyped(AWSModule):
        def build(self, config):
            return None

    with pytest.raises(TypeError, match="type hint"):
        Untyped.get_config_type()


def test_provider_modules():
    assert list(module_manager.get_provider_modules("aws")) == ["data-ingestion"]
