"""
pipelines/ - record ingestion, grouping, extraction and summaries.

Modules:
    ingest.py      - Boundary validation, metric pooling, shared latest year, filters
    grouping.py    - Grouping Engine (category / sub-category / year)
    extractors.py  - Six sub-domain extractors
    summary.py     - Company summary, key metrics, time series
    money.py       - Currency-string parsing
    utils.py       - Metric lookup, value selection and trend helpers
"""
