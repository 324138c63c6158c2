from .csv_loader import load_table, try_load_table, load_snapshot

__all__ = ["load_table", "try_load_table", "load_snapshot"]
