from .converter import HtmlLiteral, convert
from .literal import literal, literal_array
from .whitespace import BLOCK_TAGS, INLINE_TAGS, is_block, normalize, trim_leading, trim_trailing
