"""Case conversion for pandas objects.

Column labels and identifier columns in tabular data often need to move between
naming styles (e.g. `snake_case` database columns to `camelCase` JSON keys).
These functions apply `stringy.cases.convert_case` to a `pd.Series` or to the
column labels of a `pd.DataFrame`.
"""

__docformat__ = 'google'

__all__ = [
    'convert_series',
    'convert_columns'
]

import pandas as pd
from loguru import logger
from stringy.cases import convert_case, validate_cases

def convert_series(series: pd.Series, from_case, to_case) -> pd.Series:
    """
    Convert every string in a series between case styles.

    Note:
        Missing values are left as they are.

    Args:
        series: Series of identifiers in the source style
        from_case: Source `stringy.entities.CaseStyle` or its string value
        to_case: Target `stringy.entities.CaseStyle` or its string value

    Returns:
        A new series with converted values

    Raises:
        InvalidCaseError: If either style is not recognized
        SameCaseError: If both styles are the same
    """
    source, target = validate_cases(from_case, to_case)
    return series.map(lambda value: convert_case(value, source, target), na_action='ignore')

def convert_columns(frame: pd.DataFrame, from_case, to_case) -> pd.DataFrame:
    """
    Rename the column labels of a data frame between case styles.

    Note:
        Non-string labels are left as they are. The input frame is not modified.

    Args:
        frame: Data frame whose column labels are in the source style
        from_case: Source `stringy.entities.CaseStyle` or its string value
        to_case: Target `stringy.entities.CaseStyle` or its string value

    Returns:
        A copy of the frame with renamed columns

    Raises:
        InvalidCaseError: If either style is not recognized
        SameCaseError: If both styles are the same
    """
    source, target = validate_cases(from_case, to_case)

    def _rename(label):
        return convert_case(label, source, target) if isinstance(label, str) else label

    logger.debug("Renaming {} columns from {} to {}", len(frame.columns), source.value, target.value)
    return frame.rename(columns=_rename)
