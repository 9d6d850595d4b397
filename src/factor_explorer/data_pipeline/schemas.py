from __future__ import annotations

import logging

import pandas as pd
import pandera.pandas as pa
from pandera.errors import SchemaError, SchemaErrors

from factor_explorer.data_pipeline.errors import SchemaValidationError

logger = logging.getLogger(__name__)

REQUIRED_RETURNS_COLUMNS = ["location", "weighting", "name", "date", "ret"]
REQUIRED_NAMES_COLUMNS = ["abr_jkp", "name_new"]
STATS_KEY_COLUMN = "Factor"
TOTAL_FACTORS_COLUMN = "total_factors"
RANK_SUFFIX = "_rank"

_RETURNS_SCHEMA = pa.DataFrameSchema(
    {
        "location": pa.Column(str, nullable=False),
        "weighting": pa.Column(str, nullable=False),
        "name": pa.Column(str, nullable=False, checks=pa.Check.str_length(min_value=1)),
        "date": pa.Column(pa.DateTime, nullable=False),
        "ret": pa.Column(float, nullable=False),
    },
    strict=False,
    coerce=True,
)

_NAMES_SCHEMA = pa.DataFrameSchema(
    {
        "abr_jkp": pa.Column(str, nullable=False),
        "name_new": pa.Column(str, nullable=False),
    },
    strict=False,
    coerce=True,
)


def ensure_columns(frame: pd.DataFrame, required_columns: list[str], context: str) -> None:
    missing = [col for col in required_columns if col not in frame.columns]
    if missing:
        message = f"{context}: missing required columns: {missing}"
        logger.error(message)
        raise SchemaValidationError(
            message,
            user_message=f"The {context} file is missing the columns {', '.join(missing)}.",
        )


def _run_schema(schema: pa.DataFrameSchema, frame: pd.DataFrame, context: str) -> pd.DataFrame:
    try:
        return schema.validate(frame, lazy=True)
    except (SchemaError, SchemaErrors) as exc:
        logger.error("%s schema validation failed: %s", context, exc)
        raise SchemaValidationError(
            f"{context} schema validation failed: {exc}",
            user_message=f"The {context} file could not be parsed.",
        ) from exc


def validate_returns_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """Coerce and validate the (already filtered) returns rows.

    Dates and returns are parsed here; any value that does not parse is a
    validation failure rather than a silently dropped row.
    """
    if frame is None:
        raise SchemaValidationError("returns dataframe is None")
    ensure_columns(frame, REQUIRED_RETURNS_COLUMNS, "returns")

    validated = frame.copy()
    validated["name"] = validated["name"].astype(str).str.strip()
    validated["date"] = pd.to_datetime(validated["date"], errors="coerce")
    bad_dates = validated["date"].isna()
    if bad_dates.any():
        sample = frame.loc[bad_dates, "date"].head(3).tolist()
        raise SchemaValidationError(
            f"returns: {int(bad_dates.sum())} rows have invalid dates, e.g. {sample}",
            user_message="The returns file contains invalid dates.",
        )
    # One observation per calendar day; time-of-day parts are discarded.
    validated["date"] = validated["date"].dt.normalize()

    validated["ret"] = pd.to_numeric(validated["ret"], errors="coerce")
    bad_returns = validated["ret"].isna()
    if bad_returns.any():
        sample = frame.loc[bad_returns, ["name", "ret"]].head(3).to_dict(orient="records")
        raise SchemaValidationError(
            f"returns: {int(bad_returns.sum())} rows have non-numeric returns, e.g. {sample}",
            user_message="The returns file contains non-numeric returns.",
        )

    return _run_schema(_RETURNS_SCHEMA, validated, "returns")


def validate_names_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """Validate the semicolon-delimited name mapping."""
    if frame is None:
        raise SchemaValidationError("names dataframe is None")
    ensure_columns(frame, REQUIRED_NAMES_COLUMNS, "factor names")

    validated = frame.dropna(subset=REQUIRED_NAMES_COLUMNS).copy()
    validated["abr_jkp"] = validated["abr_jkp"].astype(str).str.strip()
    validated["name_new"] = validated["name_new"].astype(str).str.strip()
    validated = validated[validated["abr_jkp"] != ""]
    return _run_schema(_NAMES_SCHEMA, validated, "factor names")


def validate_stats_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """Validate the stats snapshot: a ``Factor`` key plus an open set of metrics."""
    if frame is None:
        raise SchemaValidationError("stats dataframe is None")
    ensure_columns(frame, [STATS_KEY_COLUMN], "stats")

    validated = frame.copy()
    keys = validated[STATS_KEY_COLUMN].astype("string").str.strip()
    keep = (keys.notna() & (keys != "")).fillna(False).astype(bool)
    dropped = int((~keep).sum())
    if dropped:
        logger.debug("stats: dropped %d rows without a %s key", dropped, STATS_KEY_COLUMN)
    validated = validated.loc[keep].copy()
    validated[STATS_KEY_COLUMN] = keys[keep].astype(str)

    for col in validated.columns:
        if col == STATS_KEY_COLUMN:
            continue
        validated[col] = pd.to_numeric(validated[col], errors="coerce")
    return validated
