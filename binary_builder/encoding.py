import numpy as np

NEWLINE = "\r\n"

# Number of byte values on each line of the generated arrays.
VALUES_PER_LINE = 40

# Zero bytes appended after the contents of each file. They are not part of
# the reported size.
SENTINEL = (0, 0)


class EncodedPayload:
    def __init__(self, temp_number: int, text: str, byte_size: int):
        self.temp_number = temp_number
        self.text = text
        self.byte_size = byte_size

    @property
    def symbol(self) -> str:
        return f"temp{self.temp_number}"

    def __repr__(self):
        return f"EncodedPayload({self.symbol}, {self.byte_size} B)"


# Renders byte values as "v0,v1,...,vN,", breaking the line after every
# VALUES_PER_LINE values.
def format_values(values: np.ndarray) -> str:
    out = ""
    for start in range(0, len(values), VALUES_PER_LINE):
        row = values[start : start + VALUES_PER_LINE]
        out += "".join(f"{v}," for v in row.tolist())
        if len(row) == VALUES_PER_LINE:
            out += NEWLINE + "  "
    return out


# Serializes file contents into numbered C++ array literals.
#
# Every array gets its own "tempN" symbol, so arrays never clash with each
# other even if two files end up with the same identifier. Numbering starts
# from 1 and is local to the encoder instance.
class ByteArrayEncoder:
    def __init__(self):
        self.counter = 0

    def encode(self, data: bytes) -> EncodedPayload:
        self.counter += 1
        values = np.frombuffer(data, dtype=np.uint8)

        # The last content byte is followed by the sentinel, never by a line
        # break, even if it completes a line.
        if len(values) > 0:
            body = format_values(values[:-1]) + f"{values[-1]},"
        else:
            body = ""
        body += ",".join(str(v) for v in SENTINEL)

        text = f"static const unsigned char temp{self.counter}[] = {{{body}}};"
        return EncodedPayload(self.counter, text, len(values))

