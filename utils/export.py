import pandas as pd
from datetime import date
from typing import List, Tuple, Optional
from models import Booking
from utils.formatting import utc_today
from utils.null_handling import safe_get_float

EXPORT_COLUMNS = ["ID", "Customer", "Service", "Date", "Time", "Status", "Amount", "Created"]


def bookings_to_frame(bookings: List[Booking]) -> pd.DataFrame:
    """Bookings as a DataFrame with the export column headers"""
    rows = [
        {
            "ID": b.id,
            "Customer": b.user_name or "Unknown",
            "Service": b.service_name,
            "Date": b.date,
            "Time": b.time,
            "Status": b.status,
            "Amount": safe_get_float(b.total_amount),
            "Created": b.created_at
        }
        for b in bookings
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def bookings_to_csv(bookings: List[Booking], today: Optional[date] = None) -> Tuple[str, str]:
    """
    Render bookings as CSV.

    Returns:
        Tuple[str, str]: (filename, csv text), filename is bookings-YYYY-MM-DD.csv
    """
    today = today or utc_today()
    filename = f"bookings-{today.isoformat()}.csv"
    return filename, bookings_to_frame(bookings).to_csv(index=False)
