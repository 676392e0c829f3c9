import io

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def _autosize_columns(ws, max_width=40):
    for index, column in enumerate(ws.iter_cols(min_row=4), 1):
        lengths = [len(str(cell.value)) for cell in column if cell.value is not None]
        if lengths:
            ws.column_dimensions[get_column_letter(index)].width = min(max(lengths) + 2, max_width)


def build_daily_report_workbook(report):
    """Render a daily sales report dict into an .xlsx file and return its bytes."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Daily Sales"

    header_font = Font(bold=True, size=12)
    title_font = Font(bold=True, size=16)

    ws['A1'] = "Daily Sales Report"
    ws['A1'].font = title_font
    ws['A2'] = f"Date: {report['date'].strftime('%Y-%m-%d')}"
    ws.merge_cells('A1:D1')
    ws.merge_cells('A2:D2')

    # Totals
    summary = [
        ("Total Sales", float(report['total_sales'])),
        ("Total Transactions", report['total_transactions']),
        ("Average Transaction", float(report['average_transaction'])),
    ]
    row = 4
    for label, value in summary:
        ws.cell(row=row, column=1, value=label).font = header_font
        ws.cell(row=row, column=2, value=value)
        row += 1

    # Top sellers
    row += 1
    ws.cell(row=row, column=1, value="Top Selling Items").font = title_font
    row += 1
    headers = ['#', 'Menu Item', 'Quantity', 'Revenue']
    for col, header in enumerate(headers, 1):
        ws.cell(row=row, column=col, value=header).font = header_font
    row += 1

    for rank, item in enumerate(report['top_selling_items'], 1):
        ws.cell(row=row, column=1, value=rank)
        ws.cell(row=row, column=2, value=item['name'])
        ws.cell(row=row, column=3, value=item['quantity'])
        ws.cell(row=row, column=4, value=float(item['revenue']))
        row += 1

    _autosize_columns(ws)

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
