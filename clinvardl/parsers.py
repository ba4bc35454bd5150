"""Parsers for ESearch, ESummary and EPost responses."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum

from clinvardl.errors import CategorizedError, ErrorKind, ParametersError
from clinvardl.models import (
    Assembly,
    Classification,
    DocumentSummary,
    EPostResult,
    ESearchResult,
    ESummaryResult,
    Gene,
    TraitInfo,
    TraitXref,
    Variation,
    VariationSet,
    VariationXref,
)


class ParserType(str, Enum):
    """Response formats."""

    XML = "xml"
    JSON = "json"


def _parse_error(operation: str, exc: BaseException) -> CategorizedError:
    return CategorizedError(ErrorKind.PARSE, f"{operation} xml unmarshal failed: {exc}")


def _root(data: bytes | str, operation: str) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise _parse_error(operation, exc) from exc


def _text(elem: ET.Element | None, tag: str) -> str:
    if elem is None:
        return ""
    child = elem.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def _int(elem: ET.Element, tag: str, operation: str) -> int:
    text = _text(elem, tag).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError as exc:
        raise _parse_error(operation, exc) from exc


def _xrefs(elem: ET.Element | None, path: str, cls):
    if elem is None:
        return []
    return [cls(db_source=_text(x, "db_source"), db_id=_text(x, "db_id")) for x in elem.findall(path)]


def _assembly(elem: ET.Element) -> Assembly:
    return Assembly(
        status=_text(elem, "status"),
        assembly_name=_text(elem, "assembly_name"),
        chr=_text(elem, "chr"),
        band=_text(elem, "band"),
        start=_text(elem, "start"),
        stop=_text(elem, "stop"),
        display_start=_text(elem, "display_start"),
        display_stop=_text(elem, "display_stop"),
        assembly_acc_ver=_text(elem, "assembly_acc_ver"),
        annotation_release=_text(elem, "annotation_release"),
    )


def _variation(elem: ET.Element | None) -> Variation:
    if elem is None:
        return Variation()
    return Variation(
        measure_id=_text(elem, "measure_id"),
        variation_xrefs=_xrefs(elem, "variation_xrefs/variation_xref", VariationXref),
        cdna_change=_text(elem, "cdna_change"),
        assembly_set=[_assembly(a) for a in elem.findall("variation_loc/assembly_set")],
        variant_type=_text(elem, "variant_type"),
        canonical_spdi=_text(elem, "canonical_spdi"),
    )


def _classification(elem: ET.Element | None) -> Classification:
    if elem is None:
        return Classification()
    traits = [
        TraitInfo(
            trait_xrefs=_xrefs(trait, "trait_xrefs/trait_xref", TraitXref),
            name=_text(trait, "trait_name"),
        )
        for trait in elem.findall("trait_set/trait")
    ]
    return Classification(
        description=_text(elem, "description"),
        last_evaluated=_text(elem, "last_evaluated"),
        review_status=_text(elem, "review_status"),
        traits=traits,
    )


def _document(elem: ET.Element) -> DocumentSummary:
    return DocumentSummary(
        uid=elem.get("uid", ""),
        accession=_text(elem, "accession"),
        accession_version=_text(elem, "accession_version"),
        title=_text(elem, "title"),
        variation_set=VariationSet(variation=_variation(elem.find("variation_set/variation"))),
        germline_classification=_classification(elem.find("germline_classification")),
        clinical_impact_classification=_classification(elem.find("clinical_impact_classification")),
        oncogenicity_classification=_classification(elem.find("oncogenicity_classification")),
        gene_sort=_text(elem, "gene_sort"),
        chr_sort=_text(elem, "chr_sort"),
        location_sort=_text(elem, "location_sort"),
        genes=[Gene(symbol=_text(g, "symbol"), gene_id=_text(g, "GeneID")) for g in elem.findall("genes/gene")],
        molecular_consequences=[s.text or "" for s in elem.findall("molecular_consequence_list/string")],
        protein_change=_text(elem, "protein_change"),
    )


class ESearchResponseParser:
    """Reads ESearch XML responses."""

    def parse_esearch(self, data: bytes | str) -> ESearchResult:
        root = _root(data, "esearch")
        return ESearchResult(
            count=_int(root, "Count", "esearch"),
            ids=[elem.text or "" for elem in root.findall("IdList/Id")],
            query_key=_text(root, "QueryKey"),
            web_env=_text(root, "WebEnv"),
        )


class ESummaryResponseParser:
    """Reads ESummary XML responses."""

    def parse_esummary(self, data: bytes | str) -> ESummaryResult:
        root = _root(data, "esummary")
        return ESummaryResult(
            document_summaries=[_document(d) for d in root.findall("DocumentSummarySet/DocumentSummary")]
        )


class EPostResponseParser:
    """Reads EPost XML responses."""

    def parse_epost(self, data: bytes | str) -> EPostResult:
        root = _root(data, "epost")
        return EPostResult(query_key=_text(root, "QueryKey"), web_env=_text(root, "WebEnv"))


def _require_xml(parser_type: ParserType | str) -> None:
    try:
        kind = ParserType(parser_type)
    except ValueError:
        raise ParametersError(f"unsupported parser type: {parser_type}") from None
    if kind is ParserType.JSON:
        raise ParametersError("JSON parser is not available")


def new_esearch_parser(parser_type: ParserType | str) -> ESearchResponseParser:
    """Return the ESearch parser for a response format."""
    _require_xml(parser_type)
    return ESearchResponseParser()


def new_esummary_parser(parser_type: ParserType | str) -> ESummaryResponseParser:
    """Return the ESummary parser for a response format."""
    _require_xml(parser_type)
    return ESummaryResponseParser()


def new_epost_parser(parser_type: ParserType | str) -> EPostResponseParser:
    """Return the EPost parser for a response format."""
    _require_xml(parser_type)
    return EPostResponseParser()