# Symbols are listed sparsest ink first: the most frequent colour gets the last one.

DEFAULT_SYMBOLS = "*@#&"

ASCII_RAMP = " .:-=+*#%@"

ASCII_DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Shade blocks: U+2591-U+2593 plus the full block U+2588
BLOCKS = " ░▒▓█"

PRESETS = {
    "default": DEFAULT_SYMBOLS,
    "ramp": ASCII_RAMP,
    "detailed": ASCII_DETAILED,
    "blocks": BLOCKS,
}
