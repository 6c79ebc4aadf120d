# Re-export range components
from .business import business_days, count_business_days
from .core import DateRange
from .factory import date_range
from .formatting import format_range
from .membership import is_member
from .reduce import reduce_range
from .size import is_empty, size
from .slicing import slice_accessor
