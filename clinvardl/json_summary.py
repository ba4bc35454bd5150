"""Reading ESummary responses in JSON form into flat records."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from clinvardl.errors import CategorizedError, ErrorKind


def join_with_pipe(elements: list[str], sep: str) -> str:
    """Join the elements with ``sep``; an empty list gives an empty string."""
    return sep.join(elements)


@dataclass
class GermlineClassification:
    """Germline classification with the names of its traits."""

    description: str = ""
    last_evaluated: str = ""
    review_status: str = ""
    trait_set_names: list[str] = field(default_factory=list)

    @property
    def trait_names(self) -> str:
        return join_with_pipe(self.trait_set_names, "|")


@dataclass
class JsonVariationSet:
    """One variation: identifiers, dbSNP ids and per-assembly locations."""

    measure_id: str = ""
    variant_type: str = ""
    canonical_spdi: str = ""
    db_snp_ids: list[str] = field(default_factory=list)
    locations: dict[str, str] = field(default_factory=dict)

    @property
    def db_snp_id(self) -> str:
        return join_with_pipe(self.db_snp_ids, "|")


@dataclass
class ResultItem:
    """One variation record from the JSON ``result`` object."""

    uid: str = ""
    title: str = ""
    accession: str = ""
    protein_change: str = ""
    genes: list[str] = field(default_factory=list)
    germline_classification: GermlineClassification = field(default_factory=GermlineClassification)
    variation_set: list[JsonVariationSet] = field(default_factory=list)
    molecular_consequence_list: list[str] = field(default_factory=list)

    @property
    def gene(self) -> str:
        return join_with_pipe(self.genes, "|")

    @property
    def molecular_consequences(self) -> str:
        return join_with_pipe(self.molecular_consequence_list, "|")


def _parse_error(message: str) -> CategorizedError:
    return CategorizedError(ErrorKind.PARSE, message)


def _obj(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _parse_error(f"expected a JSON object, got {type(value).__name__}")
    return value


def _list(value: Any) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise _parse_error(f"expected a JSON array, got {type(value).__name__}")
    return value


def _str(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _parse_error(f"expected a JSON string, got {type(value).__name__}")
    return value


def _germline(data: dict[str, Any]) -> GermlineClassification:
    return GermlineClassification(
        description=_str(data.get("description")),
        last_evaluated=_str(data.get("last_evaluated")),
        review_status=_str(data.get("review_status")),
        trait_set_names=[_str(_obj(t).get("trait_name")) for t in _list(data.get("trait_set"))],
    )


def _variation(data: dict[str, Any]) -> JsonVariationSet:
    db_snp_ids = []
    for xref in map(_obj, _list(data.get("variation_xrefs"))):
        if _str(xref.get("db_source")) == "dbSNP":
            db_snp_ids.append("rs" + _str(xref.get("db_id")))

    locations: dict[str, str] = {}
    for loc in map(_obj, _list(data.get("variation_loc"))):
        name = _str(loc.get("assembly_name"))
        start, stop = _str(loc.get("start")), _str(loc.get("stop"))
        locations[name + "Chromosome"] = _str(loc.get("chr"))
        locations[name + "Location"] = start if start == stop else f"{start} - {stop}"

    return JsonVariationSet(
        measure_id=_str(data.get("measure_id")),
        variant_type=_str(data.get("variant_type")),
        canonical_spdi=_str(data.get("canonical_spdi")),
        db_snp_ids=db_snp_ids,
        locations=locations,
    )


def _item(data: dict[str, Any]) -> ResultItem:
    return ResultItem(
        uid=_str(data.get("uid")),
        title=_str(data.get("title")),
        accession=_str(data.get("accession")),
        protein_change=_str(data.get("protein_change")),
        genes=[_str(_obj(g).get("symbol")) for g in _list(data.get("genes"))],
        germline_classification=_germline(_obj(data.get("germline_classification"))),
        variation_set=[_variation(_obj(v)) for v in _list(data.get("variation_set"))],
        molecular_consequence_list=[_str(s) for s in _list(data.get("molecular_consequence_list"))],
    )


def parse_result(data: bytes | str) -> list[ResultItem]:
    """Parse a JSON ESummary response into records, in the order of its ``uids``."""
    try:
        document = json.loads(data)
    except ValueError as exc:
        raise _parse_error(f"invalid JSON: {exc}") from exc
    result = _obj(_obj(document).get("result"))
    if "uids" not in result:
        raise _parse_error("missing 'uids' in result")
    items = []
    for uid in map(_str, _list(result["uids"])):
        if uid not in result:
            raise _parse_error(f"missing record for uid '{uid}'")
        items.append(_item(_obj(result[uid])))
    return items


def format_result_item(item: ResultItem) -> str:
    """Render a record as the labelled lines of a human-readable report."""
    germline = item.germline_classification
    lines = [
        "-" * 120,
        f"Name is: {item.title}",
        f"Gene(s) is: {item.gene}",
        f"Protein change is: {item.protein_change}",
        f"Condition(s) is: {germline.trait_names}",
        f"Accession is: {item.accession}",
    ]
    for variation in item.variation_set:
        locs = variation.locations
        lines += [
            f"GRCh37Chromosome is: {locs.get('GRCh37Chromosome', '')}",
            f"GRCh37Location is: {locs.get('GRCh37Location', '')}",
            f"GRCh38Chromosome is: {locs.get('GRCh38Chromosome', '')}",
            f"GRCh38Location is: {locs.get('GRCh38Location', '')}",
            f"AlleleID(s) is: {variation.measure_id}",
            f"dbSNP ID is:  {variation.db_snp_id}",
            f"Canonical SPDI is: {variation.canonical_spdi}",
            f"Variant type is: {variation.variant_type}",
        ]
    lines += [
        f"VariationID is: {item.uid}",
        f"Molecular consequence is: {item.molecular_consequences}",
        f"Germline classification is: {germline.description}",
        f"Germline date last evaluated is: {germline.last_evaluated}",
        f"Germline review status is: {germline.review_status}",
    ]
    return "\n".join(lines)