"""Records returned by the ESearch, EPost and ESummary utilities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ESearchResult:
    """Result of an ESearch call."""

    count: int = 0
    ids: list[str] = field(default_factory=list)
    query_key: str = ""
    web_env: str = ""


@dataclass
class EPostResult:
    """Result of an EPost call."""

    query_key: str = ""
    web_env: str = ""


@dataclass
class VariationXref:
    """A cross-reference of a variation to another database."""

    db_source: str = ""
    db_id: str = ""


@dataclass
class Assembly:
    """Location of a variation on one genome assembly."""

    status: str = ""
    assembly_name: str = ""
    chr: str = ""
    band: str = ""
    start: str = ""
    stop: str = ""
    display_start: str = ""
    display_stop: str = ""
    assembly_acc_ver: str = ""
    annotation_release: str = ""


@dataclass
class Variation:
    """Details of one variation."""

    measure_id: str = ""
    variation_xrefs: list[VariationXref] = field(default_factory=list)
    cdna_change: str = ""
    assembly_set: list[Assembly] = field(default_factory=list)
    variant_type: str = ""
    canonical_spdi: str = ""


@dataclass
class VariationSet:
    """The variation set of a document summary."""

    variation: Variation = field(default_factory=Variation)


@dataclass
class TraitXref:
    """A cross-reference of a trait to another database."""

    db_source: str = ""
    db_id: str = ""


@dataclass
class TraitInfo:
    """A trait (condition) with its cross-references."""

    trait_xrefs: list[TraitXref] = field(default_factory=list)
    name: str = ""


@dataclass
class Classification:
    """A germline, clinical-impact or oncogenicity classification."""

    description: str = ""
    last_evaluated: str = ""
    review_status: str = ""
    traits: list[TraitInfo] = field(default_factory=list)


@dataclass
class Gene:
    """A gene associated with a variation."""

    symbol: str = ""
    gene_id: str = ""


@dataclass
class DocumentSummary:
    """One ClinVar record as returned by ESummary."""

    uid: str = ""
    accession: str = ""
    accession_version: str = ""
    title: str = ""
    variation_set: VariationSet = field(default_factory=VariationSet)
    germline_classification: Classification = field(default_factory=Classification)
    clinical_impact_classification: Classification = field(default_factory=Classification)
    oncogenicity_classification: Classification = field(default_factory=Classification)
    gene_sort: str = ""
    chr_sort: str = ""
    location_sort: str = ""
    genes: list[Gene] = field(default_factory=list)
    molecular_consequences: list[str] = field(default_factory=list)
    protein_change: str = ""


@dataclass
class ESummaryResult:
    """Result of an ESummary call: the document summaries it returned."""

    document_summaries: list[DocumentSummary] = field(default_factory=list)