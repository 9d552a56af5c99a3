"""Test-program skeleton that compiles a template file through the parser."""

from __future__ import annotations

_SKELETON = """
#include <iostream>
#include "seephit.h"
using namespace std;

int main()
{{
  constexpr auto nodes =
  #include "{source_path}"

  dumpNode(nodes, 0, 0);
}}
"""


def build_skeleton(source_path: str) -> str:
    """Return a main() that includes `source_path` as constexpr template data.

    The path is substituted verbatim; it is resolved by the C++ compiler,
    not here.
    """
    return _SKELETON.format(source_path=source_path)
