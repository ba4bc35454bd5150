# clinvardl

`clinvardl` is a library of building blocks for fetching ClinVar variant
summaries from the NCBI Entrez E-utilities. It sends ESearch, ESummary and
EPost requests, parses their XML responses into dataclasses, splits large
result sets into batches, retries failing calls with backoff, and keeps
per-query and run-wide statistics.

## Installation

```
pip install clinvardl
```

With the test dependencies:

```
pip install "clinvardl[test]"
```

## Modules

- `clinvardl.query`: `Query(content)` is a search expression. `query_id()`
  returns an identifier made of the first gene, protein, title, quoted or
  plain term (see `extract_first_term`) and the first six hex digits of the
  MD5 of the content.
- `clinvardl.operation`: `BaseOperation` holds the request parameters and the
  HTTP handling shared by all operations. Setters (`set_db`, `set_ret_max`,
  `set_ret_mode`, `set_use_history`, `set_email`, `set_api_key`,
  `set_tool_name`, `set_use_stream`) return the operation, so they can be
  chained. `build_url()` encodes the parameters in key order. Non-200
  responses raise `HTTPError`, transport failures raise `NetError`, and an
  empty body raises `EmptyResultError`.
- `clinvardl.esearch`: `ESearchOperation.execute(query)` returns an
  `ESearchResult`. `set_query_filters` adds a filter expression, combined as
  `((query) AND filters)`. URLs longer than 2048 characters are sent as POST.
- `clinvardl.esummary`: `ESummaryOperation.execute(web_env, query_key, query)`
  returns an `ESummaryResult`. The body is read whole, or in 128 KiB chunks
  when `set_use_stream(True)` is set.
- `clinvardl.epost`: `EPostOperation.execute(ids, query)` uploads ids and
  returns an `EPostResult`.
- `clinvardl.parsers`: XML parsers for the three responses, chosen with
  `new_esearch_parser`, `new_esummary_parser` and `new_epost_parser`. Only
  `"xml"` is supported; `"json"` or any other value raises `ParametersError`.
  The operations pick their parser from the `retmode` parameter, so
  `set_ret_mode("xml")` is required.
- `clinvardl.models`: dataclasses for the results (`ESearchResult`,
  `EPostResult`, `ESummaryResult`, `DocumentSummary`, `Variation`,
  `Classification`, `Gene` and so on).
- `clinvardl.json_summary`: `parse_result(data)` reads a JSON ESummary response
  into `ResultItem` records, in the order of its `uids`. `format_result_item`
  renders one record as labelled lines.
- `clinvardl.batch`: `new_batch(total_count, batch_size)` returns a `Batch` of
  `BatchInfo` entries. A batch size of zero or less raises `CategorizedError`.
- `clinvardl.result`: `QueryResult` tracks the totals, processed records,
  failed batches, progress, duration and `QueryStatus` (success, partial or
  failed) of one query. Its mutating methods are thread-safe.
- `clinvardl.stats`: `Stats` adds up the figures across queries and logs a
  summary with `print_summary()`.
- `clinvardl.retry`: `do_with_retry(operation, config, fn, cancelled=None)`
  calls `fn` until it succeeds. It gives up on errors that `should_retry`
  rejects and re-raises the last error when `RetryConfig.max_retries` attempts
  are used up. Setting the `cancelled` event stops it with
  `EntrezTimeoutError`. The defaults are 5 attempts and a 2 s base delay
  multiplied by 1.5 per attempt, capped at 10 s, with ±20 % jitter.
- `clinvardl.errors`: the exception hierarchy under `EntrezError`.
  `RetryableError` subclasses decide for themselves, through `should_retry()`,
  whether another attempt is worthwhile.
- `clinvardl.logcdl`: a logger with levels (`debug`, `info`, `tip`, `warn`,
  `error`, `success`, `panic`, `fatal`). Formats take `%v`, `%s` and `%d`.
  `init_logger()` also appends to `logs/clinvardl_<date>.log` in the current
  directory. Without it, messages go to the console only. `panic` raises
  `RuntimeError` and `fatal` raises `SystemExit(1)`.
- `clinvardl.editor`, `clinvardl.sysinfo`, `clinvardl.paths`: the editor from
  `$EDITOR` or a per-system default, the system name and root check,
  `check_dir`, `backup` (moves files into a timestamped `backup` folder) and
  `normalize_path`.

## Example

```python
from clinvardl.batch import new_batch
from clinvardl.esearch import ESearchOperation
from clinvardl.esummary import ESummaryOperation
from clinvardl.query import Query

query = Query('BRCA1[gene] AND "likely pathogenic"')
print(query.query_id())          # "BRCA1-" followed by six hex digits

search = ESearchOperation()
search.set_db("clinvar").set_ret_mode("xml").set_use_history(True)
search.set_email("user@example.com")
found = search.execute(query)

summary = ESummaryOperation()
summary.set_db("clinvar").set_ret_mode("xml")
for info in new_batch(found.count, 500).batch_infos:
    summary.parameters["retstart"] = str(info.start)
    summary.set_ret_max(info.size)
    result = summary.execute(found.web_env, found.query_key, query)
    for doc in result.document_summaries:
        print(doc.accession, doc.title)
```

An API key set with `set_api_key` raises the request rate that NCBI allows.

## What the package does not do

- It has no command-line program. It is used as a library.
- It does not run the search-then-summary flow for you. Sending batches
  concurrently, caching results between runs and retrying only the batches
  that failed are left to the caller, using the pieces above.
- It does not write results to spreadsheets or other output files.
- It has no rate limiter of its own. Each operation accepts a `rate_limiter`
  callable, which is called before every request and should block until the
  request may go out.