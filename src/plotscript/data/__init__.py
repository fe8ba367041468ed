from .frames import load_series_csv, series_from_frame

__all__ = ["load_series_csv", "series_from_frame"]
