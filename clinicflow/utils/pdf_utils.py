"""
PDF Generation Utilities using ReportLab
"""
import io
import logging
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import HRFlowable, SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from clinicflow.utils.formatting import NOT_AVAILABLE, calculate_age, format_date

logger = logging.getLogger(__name__)

BRAND_COLOR = colors.HexColor('#0e7490')

NO_MEDICATIONS_TEXT = "No medications prescribed for this appointment."


def _styles():
    styles = getSampleStyleSheet()
    return {
        'doctor': ParagraphStyle(
            name='DoctorName',
            parent=styles['Heading1'],
            fontSize=18,
            textColor=BRAND_COLOR,
            spaceAfter=2,
        ),
        'clinic': ParagraphStyle(
            name='ClinicName',
            parent=styles['Heading2'],
            fontSize=13,
            alignment=2,
            spaceAfter=2,
        ),
        'small': ParagraphStyle(name='Small', parent=styles['Normal'], fontSize=9, leading=11),
        'small_right': ParagraphStyle(name='SmallRight', parent=styles['Normal'], fontSize=9, leading=11, alignment=2),
        'heading': ParagraphStyle(
            name='SectionHeading',
            parent=styles['Heading2'],
            fontSize=14,
            textColor=BRAND_COLOR,
            spaceAfter=6,
        ),
        'cell': ParagraphStyle(name='Cell', parent=styles['Normal'], fontSize=9, leading=11),
        'normal': styles['Normal'],
        'note': ParagraphStyle(name='Note', parent=styles['Normal'], fontSize=9, textColor=colors.grey, alignment=1),
    }


def _p(text, style):
    return Paragraph(escape(str(text)) if text else NOT_AVAILABLE, style)


def _header(doctor_info, clinic_info, styles):
    left = [
        Paragraph(escape(doctor_info.get('name', '')), styles['doctor']),
        Paragraph(escape(doctor_info.get('qualifications', '')), styles['small']),
        Paragraph(escape(doctor_info.get('registration', '')), styles['small']),
        Paragraph(escape(doctor_info.get('phone', '')), styles['small']),
    ]
    right = [
        Paragraph(escape(clinic_info.get('name', '')), styles['clinic']),
        Paragraph(escape(clinic_info.get('address', '')), styles['small_right']),
        Paragraph(escape(clinic_info.get('phone', '')), styles['small_right']),
        Paragraph(escape(clinic_info.get('email', '')), styles['small_right']),
        Paragraph(escape(clinic_info.get('timings', '')), styles['small_right']),
    ]
    header = Table([[left, right]], colWidths=[8.5*cm, 8.5*cm])
    header.setStyle(TableStyle([('VALIGN', (0, 0), (-1, -1), 'TOP')]))
    return [header, Spacer(1, 6), HRFlowable(width='100%', thickness=2, color=BRAND_COLOR), Spacer(1, 10)]


def _patient_block(appointment, patient, styles):
    age = calculate_age(patient.dob, today=appointment.date.date())
    age_gender = f"{age if age is not None else NOT_AVAILABLE} / {patient.gender.value}"
    vitals = appointment.vitals
    vitals_text = f"Temp: {vitals.temp or NOT_AVAILABLE}, BP: {vitals.bp or NOT_AVAILABLE}" if vitals else NOT_AVAILABLE
    data = [
        ["Patient Name:", _p(patient.name, styles['cell']), "Date:", format_date(appointment.date)],
        ["Age / Gender:", age_gender, "Patient ID:", patient.id],
        ["Reason:", _p(appointment.reason, styles['cell']), "Vitals:", _p(vitals_text, styles['cell'])],
    ]
    table = Table(data, colWidths=[3*cm, 6*cm, 2.5*cm, 5.5*cm])
    table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, -1), colors.HexColor('#f5f5f5')),
        ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
        ('FONTNAME', (2, 0), (2, -1), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('BOX', (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    return [table, Spacer(1, 16)]


def _medication_table(prescription, styles):
    story = [Paragraph("Rx", styles['heading'])]
    if not prescription or not prescription.medications:
        story.append(Paragraph(f"<i>{NO_MEDICATIONS_TEXT}</i>", styles['note']))
        return story + [Spacer(1, 16)]

    rows = [["#", "Medication", "Dosage", "Frequency", "Duration", "Instructions"]]
    for idx, med in enumerate(prescription.medications, start=1):
        rows.append([
            str(idx),
            _p(med.medication, styles['cell']),
            _p(med.dosage, styles['cell']),
            _p(med.frequency, styles['cell']),
            _p(med.duration, styles['cell']),
            _p(med.instructions, styles['cell']),
        ])
    table = Table(rows, colWidths=[0.8*cm, 4*cm, 2.4*cm, 3*cm, 2.3*cm, 4.5*cm], repeatRows=1)
    table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), BRAND_COLOR),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
    ]))
    return story + [table, Spacer(1, 16)]


def _advice_block(appointment, styles):
    return [
        Paragraph("Advice", styles['heading']),
        _p(appointment.advice_given, styles['normal']),
        Spacer(1, 8),
        Paragraph(f"<b>Follow-up:</b> {escape(format_date(appointment.follow_up_date))}", styles['normal']),
        Spacer(1, 40),
    ]


def _signature_block(doctor_info, styles):
    signature = Table(
        [["", "_" * 30], ["", doctor_info.get('name', '')], ["", doctor_info.get('registration', '')]],
        colWidths=[10*cm, 7*cm],
    )
    signature.setStyle(TableStyle([
        ('ALIGN', (1, 0), (1, -1), 'CENTER'),
        ('FONTNAME', (1, 1), (1, 1), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
    ]))
    return [
        signature,
        Spacer(1, 24),
        Paragraph(
            "<i>This is a computer-generated prescription. Please follow the dosage instructions carefully.</i>",
            styles['note'],
        ),
    ]


def generate_prescription_pdf(appointment, patient, prescription=None, doctor_info=None, clinic_info=None):
    """
    Render the printable prescription of one appointment.

    Args:
        appointment: Appointment the prescription was issued for
        patient: Patient owning the appointment
        prescription: Prescription for the appointment (optional; a note is
            printed instead of the medication table when missing)
        doctor_info: dict with name, qualifications, registration, phone
        clinic_info: dict with name, address, phone, email, timings

    Returns:
        bytes: the PDF document
    """
    doctor_info = doctor_info or {}
    clinic_info = clinic_info or {}
    styles = _styles()

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4,
        leftMargin=2*cm, rightMargin=2*cm, topMargin=2*cm, bottomMargin=2*cm,
        title=f"Prescription - {patient.name}",
    )
    story = []
    story += _header(doctor_info, clinic_info, styles)
    story += _patient_block(appointment, patient, styles)
    story += _medication_table(prescription, styles)
    story += _advice_block(appointment, styles)
    story += _signature_block(doctor_info, styles)
    doc.build(story)

    pdf = buffer.getvalue()
    logger.info(f"Prescription PDF generated for appointment {appointment.id} ({len(pdf)} bytes)")
    return pdf
