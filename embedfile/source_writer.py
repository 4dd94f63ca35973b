import os

from .literals import format_byte_rows

NAMES_TABLE = "EMBEDDED_FILE_NAMES"
DATA_TABLE = "EMBEDDED_FILE_DATA"
SIZES_TABLE = "EMBEDDED_FILE_DATA_SIZES"

INCLUDES = (
    "#include <stdlib.h>\n"
    "#include <string.h>\n"
)

LOOKUP_FUNCTION_TEMPLATE = r'''const char* %(function)s(const char* filename, size_t* length) {
  for (size_t i = 0; %(names)s[i] != NULL; i++) {
    if (0 == strcmp(filename, %(names)s[i])) {
      if (length) {
        *length = %(sizes)s[i];
      }
      return %(data)s[i];
    }
  }
  return NULL;
}
'''

def comment(text):
    # undecodable path bytes show up as \udcXX escapes
    text = text.encode("utf-8", "backslashreplace").decode("utf-8")
    return "/* %s */" % text.replace("*/", "* /")

def write_name_table(f, bundle):
    f.write(f"static const char* const {NAMES_TABLE}[] = {{\n")
    for entry in bundle:
        f.write(f"\t{comment(entry.name)}\n")
        f.write("\t(const char[]){\n")
        f.write(format_byte_rows(os.fsencode(entry.name)))
        f.write("\n\t},\n")
    # end of table for the lookup scan
    f.write("\tNULL\n")
    f.write("};\n\n")

def write_data_table(f, bundle):
    f.write(f"static const char* const {DATA_TABLE}[] = {{\n")
    blocks = []
    for entry in bundle:
        blocks.append(
            f"\t{comment(entry.path)}\n"
            "\t(const char*)(const unsigned char[]){\n"
            f"{format_byte_rows(entry.data)}\n"
            "\t}")
    f.write(",\n".join(blocks))
    f.write("\n};\n\n")

def write_size_table(f, bundle):
    f.write(f"static const size_t {SIZES_TABLE}[] = {{\n")
    f.write(",\n".join(f"\t{comment(entry.path)}\n\t{entry.length}" for entry in bundle))
    f.write("\n};\n\n")

def write_lookup_function(f, function_name):
    f.write(LOOKUP_FUNCTION_TEMPLATE % {
        "function": function_name,
        "names": NAMES_TABLE,
        "data": DATA_TABLE,
        "sizes": SIZES_TABLE,
    })

def write_source(f, bundle, function_name):
    f.write(INCLUDES)
    f.write("\n")
    write_name_table(f, bundle)
    write_data_table(f, bundle)
    write_size_table(f, bundle)
    write_lookup_function(f, function_name)
