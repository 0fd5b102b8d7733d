import pytest

from audiomatch.interfaces.catalog import CatalogSource
from audiomatch.interfaces.enrichment import MetadataEnricher


class TestCatalogSourceABC:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            CatalogSource()

    def test_subclass_must_implement_fetch_page(self):
        class IncompleteCatalog(CatalogSource):
            pass

        with pytest.raises(TypeError):
            IncompleteCatalog()


class TestMetadataEnricherABC:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            MetadataEnricher()

    def test_subclass_must_implement_enrich(self):
        class IncompleteEnricher(MetadataEnricher):
            pass

        with pytest.raises(TypeError):
            IncompleteEnricher()
