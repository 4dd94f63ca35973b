import os
import string

from .source_writer import INCLUDES

def guard_char(b):
    c = chr(b)
    if c in string.ascii_lowercase:
        return c.upper()
    if c in string.ascii_uppercase or c in string.digits:
        return c
    return "_"

def guard_name(header_path):
    # Upper case letters, keep digits, replace every other byte with _
    # Makes no attempt to deal with character encoding
    return "_%s_" % "".join(guard_char(b) for b in os.fsencode(header_path))

def function_declaration(function_name):
    return f"const char* {function_name}(const char* filename, size_t* length);\n"

def write_header(f, header_path, function_name):
    guard = guard_name(header_path)
    f.write(f"#ifndef {guard}\n")
    f.write(f"#define {guard}\n")
    f.write(INCLUDES)
    f.write("\n")
    f.write(function_declaration(function_name))
    f.write("\n#endif\n")
