from talkbox.layout.metrics import FontFamily as FontFamily
from talkbox.layout.metrics import FontVariant as FontVariant
from talkbox.layout.metrics import PygameFontMetrics as PygameFontMetrics
from talkbox.layout.metrics import TextMetrics as TextMetrics
from talkbox.layout.metrics import resolve_metrics as resolve_metrics
from talkbox.layout.paginate import Page as Page
from talkbox.layout.paginate import get_rows as get_rows
from talkbox.layout.paginate import get_rows_fractional as get_rows_fractional
from talkbox.layout.paginate import paginate as paginate
from talkbox.layout.paginate import process as process
from talkbox.layout.paginate import window as window
from talkbox.layout.wrap import split_lines as split_lines
from talkbox.layout.wrap import wrap as wrap
