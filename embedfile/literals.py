import numpy as np

# Number of hex literals per row in generated arrays
HEX_COLS = 12

HEX_LITERALS = np.array([f"0x{b:02X}" for b in range(256)])

def hex_literals(data):
    """Return the C hex literal of every byte in data as a numpy string array."""
    return HEX_LITERALS[np.frombuffer(bytes(data), dtype=np.uint8)]

def format_byte_rows(data, cols=HEX_COLS, terminate=True, indent="\t\t"):
    """
    Formats bytes as rows of comma separated hex literals.

    Parameters:
    - data: bytes-like, the values to encode
    - cols: int, number of literals per row
    - terminate: bool, append an explicit 0x00 after the real content
    - indent: str, prefix of every row

    A trailing zero literal is not part of the content; callers that report
    sizes use len(data).
    """
    literals = hex_literals(data)
    if terminate:
        literals = np.append(literals, HEX_LITERALS[0])

    rows = [
        ", ".join(literals[i:i + cols])
        for i in range(0, len(literals), cols)
    ]
    return ",\n".join(indent + row for row in rows)
