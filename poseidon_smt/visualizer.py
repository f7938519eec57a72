# Console rendering of the materialized part of a tree, for debugging.


def short_fr(value):
    """12314..12314 style: first and last 5 digits."""
    s = str(value)
    if len(s) > 10:
        return f"{s[:5]}..{s[-5:]}"
    return s


def _render_node(lines, node, depth, level, prefix, is_right):
    indent = prefix + ("└── " if is_right else "├── ")
    if node.is_leaf:
        lines.append(f"{indent}{level} (Leaf Value: {short_fr(node.value)})")
        return

    kind = "Root Node" if level == 0 else "Inner Node"
    lines.append(f"{indent}{level} ({kind}: {short_fr(node.hash)})")

    child_prefix = prefix + ("    " if is_right else "│   ")
    # children of the last inner level are leaves, missing ones read as 0
    leaf_level = level == depth - 1
    for child, right in ((node.left, False), (node.right, True)):
        if child is not None:
            _render_node(lines, child, depth, level + 1, child_prefix, right)
        else:
            branch = "└── " if right else "├── "
            what = "Leaf Value: 0" if leaf_level else "Empty"
            lines.append(f"{child_prefix}{branch}{level + 1} ({what})")


def render_tree(tree):
    lines = [
        f"Sparse Merkle Tree Visualization (Depth: {tree.depth})",
        "=======================================",
    ]
    if tree.is_empty():
        lines.append("Empty tree")
    else:
        _render_node(lines, tree.root, tree.depth, 0, "", True)
    return "\n".join(lines)


def visualize(tree):
    print(render_tree(tree))
