"""Excel 내보내기 유틸리티 — pydantic 뷰 목록을 xlsx로 직렬화.

Spreadsheet export utility.
Serializes a list of pydantic view objects to a single-sheet xlsx workbook.
Column headers come from each field's ``title`` (falling back to the field
name); fields declared with ``exclude=True`` are left out, matching what
the JSON API shows.
"""

from collections.abc import Sequence
from datetime import date, datetime, time
from enum import Enum
from typing import Any, BinaryIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from pydantic import BaseModel

XLSX_MEDIA_TYPE: str = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Excel 시트 이름 최대 길이 (Excel limits sheet titles to 31 characters)
_MAX_SHEET_TITLE: int = 31
_MIN_WIDTH: int = 10
_MAX_WIDTH: int = 50


def export_columns(view_class: type[BaseModel]) -> list[tuple[str, str]]:
    """내보낼 (필드 이름, 헤더) 목록을 반환합니다.

    Return the ``(field_name, header)`` pairs exported for ``view_class``.
    """
    return [
        (name, field.title or name)
        for name, field in view_class.model_fields.items()
        if not field.exclude
    ]


def _cell_value(value: Any) -> Any:
    # openpyxl은 timezone-aware datetime을 거부함 (openpyxl rejects tz-aware datetimes)
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def export_excel(
    rows: Sequence[BaseModel],
    sheet_name: str,
    view_class: type[BaseModel],
    sink: BinaryIO,
) -> None:
    """뷰 목록을 xlsx 워크북으로 직렬화하여 sink에 씁니다.

    Write ``rows`` as an xlsx workbook to the binary stream ``sink``.
    The first row holds the styled headers; one data row follows per view.

    Args:
        rows: 내보낼 뷰 목록 (Views to export, may be empty)
        sheet_name: 시트 이름 (Worksheet title, truncated to 31 chars)
        view_class: 컬럼 정의에 사용할 뷰 클래스 (View class defining the columns)
        sink: 출력 바이너리 스트림 (Writable binary stream)
    """
    columns: list[tuple[str, str]] = export_columns(view_class)

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name[:_MAX_SHEET_TITLE] or "Sheet1"

    header_font = Font(bold=True, color="FFFFFF", size=11)
    header_fill = PatternFill(start_color="2D3436", end_color="2D3436", fill_type="solid")
    widths: list[int] = []
    for col_idx, (_, header) in enumerate(columns, 1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center")
        widths.append(len(header))

    for row_idx, row in enumerate(rows, 2):
        for col_idx, (name, _) in enumerate(columns, 1):
            value: Any = _cell_value(getattr(row, name, None))
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            # '='로 시작하는 문자열도 수식이 아닌 텍스트로 저장 (Stored text is never written as a formula)
            if isinstance(value, str) and value.startswith("="):
                cell.data_type = "s"
            widths[col_idx - 1] = max(widths[col_idx - 1], len(str(value)))

    for col_idx, width in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max(width + 2, _MIN_WIDTH), _MAX_WIDTH)

    wb.save(sink)
