from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Optional, Union

import pandas as pd

from .errors import SurveyInputError
from .models import SurveyInput

TEXT_COLUMN_HINTS: tuple[str, ...] = ("response", "comment", "feedback", "answer", "text")

CsvSource = Union[str, Path, IO[str], IO[bytes]]


def count_responses(text: str) -> int:
    """Number of non-blank lines; one response per line."""
    return sum(1 for line in text.split("\n") if line.strip())


def pick_text_column(headers: list[str]) -> Optional[str]:
    """
    Choose the column holding free-text answers.

    First header whose name contains one of TEXT_COLUMN_HINTS
    (case-insensitive), otherwise the first header.
    """
    for h in headers:
        lowered = h.lower()
        if any(hint in lowered for hint in TEXT_COLUMN_HINTS):
            return h
    return headers[0] if headers else None


def _dedup_headers(headers: list[str]) -> list[str]:
    """Suffix repeats the way pandas does (".1", ".2"); stripping can create new ones."""
    seen: dict[str, int] = {}
    out: list[str] = []
    for h in headers:
        name = h
        while name in seen:
            seen[h] += 1
            name = f"{h}.{seen[h]}"
        seen.setdefault(h, 0)
        seen[name] = 0
        out.append(name)
    return out


def read_survey_csv(source: CsvSource) -> pd.DataFrame:
    """Read a survey CSV as all-string columns with trimmed headers and cells."""
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError as e:
        raise SurveyInputError("CSV file is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise SurveyInputError(f"Error reading CSV file: {e}") from e

    df.columns = _dedup_headers([str(c).strip() for c in df.columns])
    # Short rows come back as NaN even with keep_default_na=False.
    df = df.fillna("")
    for c in df.columns:
        df[c] = df[c].astype(str).str.strip()
    return df


def survey_from_frame(df: pd.DataFrame) -> SurveyInput:
    headers = list(df.columns)
    column = pick_text_column(headers)
    if column is None:
        raise SurveyInputError("CSV file has no columns")

    responses = [v for v in df[column].tolist() if v and v.strip()]
    text = "\n".join(responses)
    return SurveyInput(text=text, column=column, headers=headers, response_count=len(responses))


def load_survey_csv(source: CsvSource) -> SurveyInput:
    """Read a CSV and extract its free-text responses, one per line."""
    return survey_from_frame(read_survey_csv(source))


def load_survey_upload(file_name: str, data: bytes) -> SurveyInput:
    """Same as load_survey_csv for an uploaded file's name and raw bytes."""
    if not file_name.lower().endswith(".csv"):
        raise SurveyInputError("Please upload a CSV file")
    return load_survey_csv(io.BytesIO(data))


def survey_from_text(text: str) -> SurveyInput:
    """Wrap pasted text (one response per line)."""
    cleaned = text.strip()
    return SurveyInput(text=cleaned, column=None, headers=[], response_count=count_responses(cleaned))
