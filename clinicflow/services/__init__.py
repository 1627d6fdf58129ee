from .reducer import reduce, derive
from .store import ClinicStore, new_id, sequential_ids

__all__ = ["reduce", "derive", "ClinicStore", "new_id", "sequential_ids"]
