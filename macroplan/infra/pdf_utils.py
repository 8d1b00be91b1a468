import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from macroplan.logic.reporting.nutrition import compute_week_nutrition
from macroplan.utilities.constants import DAYS, MEALS


def _fmt_totals(t) -> str:
    return f"P {t['protein']}g / F {t['fats']}g / C {t['carbs']}g / {t['calories']} kcal"


def generate_pdf_for_week(plan, title: str = "Weekly meal plan"):
    """Generate a PDF table: Day / one column per meal slot / day totals, plus week totals."""
    nutrition = compute_week_nutrition(plan)
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    cell = styles["BodyText"]
    elements = [
        Paragraph(title, styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", *MEALS, "Totals"]]
    for day in DAYS:
        day_info = nutrition["days"][day]
        row = [day]
        for slot in MEALS:
            names = [escape(d["name"]) for d in day_info["meals"][slot]]
            row.append(Paragraph("<br/>".join(names) or "-", cell))
        row.append(Paragraph(_fmt_totals(day_info), cell))
        data.append(row)

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,0), "CENTER"),
        ("VALIGN", (0,0), (-1,-1), "TOP"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    elements.append(Spacer(1, 12))
    elements.append(Paragraph(f"Week: {_fmt_totals(nutrition['week_totals'])}", styles["Heading3"]))
    elements.append(Paragraph(f"Average per day: {_fmt_totals(nutrition['averages'])}", styles["Normal"]))
    doc.build(elements)
    return buf.getvalue()
