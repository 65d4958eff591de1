import io
import re
from datetime import date

from flask import current_app
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from eventhub.models.enums import RegistrationStatus
from eventhub.services.registration_service import RegistrationService

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

HEADERS = ["S.No", "Name", "Email", "Phone", "Status", "Registration Date"]
COLUMN_WIDTHS = [8, 25, 30, 15, 12, 20]
HEADER_ROW = 4
FIRST_DATA_ROW = 5

# status -> (fill, font colour)
STATUS_COLORS = {
    RegistrationStatus.CONFIRMED.value: ("FFC6EFCE", "FF006100"),
    RegistrationStatus.PENDING.value: ("FFFFEB9C", "FF9C6500"),
    RegistrationStatus.REJECTED.value: ("FFFFC7CE", "FF9C0006"),
}


def _solid(color):
    return PatternFill(fill_type="solid", start_color=color, end_color=color)


class ExportService:
    @staticmethod
    def filename(event, today=None) -> str:
        today = today or date.today()
        safe_name = re.sub(r"\s+", "_", event.name)
        return f"{safe_name}_Participants_{today.isoformat()}.xlsx"

    @staticmethod
    def build_workbook(event, registrations) -> Workbook:
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = "Participants"
        last_column = get_column_letter(len(HEADERS))

        worksheet.merge_cells(f"A1:{last_column}1")
        title_cell = worksheet["A1"]
        title_cell.value = f"{event.name} - Participants List"
        title_cell.font = Font(bold=True, size=14)
        title_cell.alignment = Alignment(horizontal="center", vertical="center")
        worksheet.row_dimensions[1].height = 25

        worksheet.merge_cells(f"A2:{last_column}2")
        details_cell = worksheet["A2"]
        details_cell.value = (
            f"Event Date: {event.date.isoformat()} | Total Capacity: {event.capacity}"
        )
        details_cell.font = Font(size=11, italic=True)
        details_cell.alignment = Alignment(horizontal="center")
        worksheet.row_dimensions[2].height = 20

        for column, header in enumerate(HEADERS, start=1):
            cell = worksheet.cell(row=HEADER_ROW, column=column, value=header)
            cell.font = Font(bold=True, color="FFFFFFFF")
            cell.fill = _solid("FF667EEA")
            cell.alignment = Alignment(horizontal="center", vertical="center")
        worksheet.row_dimensions[HEADER_ROW].height = 20

        for column, width in enumerate(COLUMN_WIDTHS, start=1):
            worksheet.column_dimensions[get_column_letter(column)].width = width

        for index, registration in enumerate(registrations):
            row = FIRST_DATA_ROW + index
            values = [
                index + 1,
                registration.name,
                registration.email,
                registration.phone,
                registration.status.upper(),
                registration.registered_at.strftime("%m/%d/%Y"),
            ]
            for column, value in enumerate(values, start=1):
                cell = worksheet.cell(row=row, column=column, value=value)
                if index % 2 == 0:
                    cell.fill = _solid("FFF5F5F5")

            worksheet.cell(row=row, column=1).alignment = Alignment(horizontal="center")
            status_cell = worksheet.cell(row=row, column=5)
            status_cell.alignment = Alignment(horizontal="center")
            fill, font_color = STATUS_COLORS.get(
                registration.status, STATUS_COLORS[RegistrationStatus.REJECTED.value]
            )
            status_cell.fill = _solid(fill)
            status_cell.font = Font(color=font_color)

        counts = RegistrationService.status_counts(registrations)
        summary_row = FIRST_DATA_ROW + len(registrations) + 1
        summary_values = [
            "",
            f"Total Participants: {len(registrations)}",
            f"Confirmed: {counts[RegistrationStatus.CONFIRMED.value]}",
            f"Pending: {counts[RegistrationStatus.PENDING.value]}",
            f"Rejected: {counts[RegistrationStatus.REJECTED.value]}",
        ]
        for column, value in enumerate(summary_values, start=1):
            cell = worksheet.cell(row=summary_row, column=column, value=value)
            cell.font = Font(bold=True)
            cell.fill = _solid("FFE2EFDA")

        return workbook

    @staticmethod
    def render(event, registrations) -> bytes:
        workbook = ExportService.build_workbook(event, registrations)
        buffer = io.BytesIO()
        workbook.save(buffer)
        current_app.logger.info(
            f"Generated participants export for event {event.id} with {len(registrations)} rows"
        )
        return buffer.getvalue()
