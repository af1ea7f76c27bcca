#  Copyright  2021 Alexis Lopez Zubieta
#
#  Permission is hereby granted, free of charge, to any person obtaining a
#  copy of this software and associated documentation files (the "Software"),
#  to deal in the Software without restriction, including without limitation the
#  rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
#  sell copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.

NOT_FOUND = "not found"


def _describe(binary_file):
    return "%s => %s" % (binary_file.name, binary_file.real_path or NOT_FOUND)


def format_direct_dependencies(tree) -> [str]:
    root_id = tree.root_id()
    return [_describe(tree.get(child_id)) for child_id in tree.children_ids(root_id)]


def format_tree(tree, indent="    ") -> [str]:
    lines = []
    for depth, node_id in tree.walk():
        binary_file = tree.get(node_id)
        if binary_file.is_root:
            line = binary_file.name
            if binary_file.interpreter:
                line += " (interpreter => %s)" % binary_file.interpreter
        else:
            line = indent * (depth - 1) + _describe(binary_file)
        lines.append(line)

    return lines
