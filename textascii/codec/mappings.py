# textascii mappings: curated constants shared by the builder and the runtime.

MAX_CODEPOINT = 0x10FFFF

# Emitted for codepoints with no known transliteration.
DEFAULT_PLACEHOLDER = "[?]"

# Older transliteration tables mark unknown characters with these strings.
LEGACY_UNKNOWN_MARKERS = {
    "[?]",
    "[?] ",
}

SURROGATES = range(0xD800, 0xE000)

# Blocks whose characters get their Unicode name as an alternative
# transliteration (inclusive ranges).
EMOJI_BLOCKS = (
    # Miscellaneous Symbols
    (0x2600, 0x26FF),
    # Miscellaneous Symbols and Pictographs
    (0x1F300, 0x1F5FF),
    # Emoticons
    (0x1F600, 0x1F64F),
    # Transport and Map Symbols
    (0x1F680, 0x1F6FF),
    # Supplemental Symbols and Pictographs
    (0x1F900, 0x1F9FF),
)
