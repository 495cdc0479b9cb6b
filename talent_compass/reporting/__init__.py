from .csv_export import CSV_HEADER, export_filename, write_employees_csv
from .dashboard import DashboardSummary, build_dashboard

__all__ = ["CSV_HEADER", "DashboardSummary", "build_dashboard", "export_filename", "write_employees_csv"]
