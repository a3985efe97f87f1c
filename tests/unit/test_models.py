"""Unit tests for the domain objects."""

from __future__ import annotations

from variation_query.models import Allele, Synonym, Variation


class TestVariation:
    def test_defaults(self) -> None:
        var = Variation(dbid=1, name="rs1", source="dbSNP")
        assert var.alleles == []
        assert var.synonyms == []
        assert var.validation_states == set()

    def test_add_allele(self) -> None:
        var = Variation(dbid=1, name="rs1", source="dbSNP")
        var.add_allele(Allele(dbid=10, allele="A"))
        assert [a.allele for a in var.alleles] == ["A"]

    def test_synonym_accessors(self) -> None:
        var = Variation(dbid=1, name="rs1", source="dbSNP")
        var.add_synonym("Affy", "SNP_A-1")
        var.add_synonym("dbSNP", "ss1")
        var.add_synonym("Affy", "SNP_A-2")

        assert var.synonyms[0] == Synonym(name="SNP_A-1", source="Affy")
        assert var.get_all_synonyms() == ["SNP_A-1", "ss1", "SNP_A-2"]
        assert var.get_all_synonyms("Affy") == ["SNP_A-1", "SNP_A-2"]
        assert var.get_all_synonyms("HGVbase") == []
        assert var.get_all_synonym_sources() == ["Affy", "dbSNP"]
