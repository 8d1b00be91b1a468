from macroplan.utilities.config import DATA_DIR, STORAGE_FILE

# Centralized paths for data files (single source of truth)
__all__ = ['DATA_DIR', 'STORAGE_FILE']
