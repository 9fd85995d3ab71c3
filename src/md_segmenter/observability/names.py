# src/md_segmenter/observability/names.py

"""Standard metric names for md-segmenter observability.

Durations are in milliseconds. Conversion is left to the metrics backend.
"""

# ============================================================================
# Segmenter Metrics
# ============================================================================

# Duration
SEGMENTER_PARSE_DURATION = "segmenter_parse_duration"

# Counters
SEGMENTER_FILES_PARSED_TOTAL = "segmenter_files_parsed_total"
SEGMENTER_READ_ERRORS_TOTAL = "segmenter_read_errors_total"

# Gauges (paragraphs produced by a single parse)
SEGMENTER_PARAGRAPHS_EMITTED = "segmenter_paragraphs_emitted"


# ============================================================================
# Collector Metrics
# ============================================================================

# Duration
COLLECTOR_COLLECT_DURATION = "collector_collect_duration"

# Counters
COLLECTOR_ENTRIES_SKIPPED_TOTAL = "collector_entries_skipped_total"
