from services.export.encoders import BinaryEncoder, PlaceholderEncoder, PLACEHOLDER_CONTENT
from services.export.exporter import ResumeExporter, display_filename, export_filename, get_resume_exporter
from services.export.html_exporter import render_builtin_html, render_resume_html
from services.export.json_exporter import export_resume_json, export_resume_dict

__all__ = [
    "BinaryEncoder",
    "PlaceholderEncoder",
    "PLACEHOLDER_CONTENT",
    "ResumeExporter",
    "display_filename",
    "export_filename",
    "get_resume_exporter",
    "render_builtin_html",
    "render_resume_html",
    "export_resume_json",
    "export_resume_dict",
]
