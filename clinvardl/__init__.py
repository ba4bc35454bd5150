"""Building blocks for fetching ClinVar variant summaries through the NCBI Entrez E-utilities."""

__version__ = "1.0.0"