"""algorithm subpackage: public API for the comparison pipeline.

Stages, leaf-first: ``PathLinearizer`` -> ``RepetitionGrouper`` ->
``Aligner`` -> ``DiffEngine``.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from structural_diff.algorithm import CompareOptions, DiffEngine
    from structural_diff.algorithm import PathLinearizer, RepetitionGrouper

    options = CompareOptions(primary_sort_field="id")
    grouper = RepetitionGrouper()
    a = grouper.group(PathLinearizer(options).linearize(tree_a))
    b = grouper.group(PathLinearizer(options).linearize(tree_b))
    report = DiffEngine(options).run(a.root, b.root, DiffReport("A", "B"))
"""

from __future__ import annotations

from structural_diff.algorithm.aligner import AlignedPair, Aligner
from structural_diff.algorithm.config import CompareOptions, IgnoreMatchMode
from structural_diff.algorithm.engine import DiffEngine
from structural_diff.algorithm.grouper import (
    GroupedDocument,
    Occurrence,
    OccurrenceGroup,
    RepetitionGrouper,
)
from structural_diff.algorithm.linearizer import (
    AttributeRecord,
    LeafRecord,
    Linearization,
    NodeRecord,
    PathLinearizer,
)

__all__ = [
    "AlignedPair",
    "Aligner",
    "AttributeRecord",
    "CompareOptions",
    "DiffEngine",
    "GroupedDocument",
    "IgnoreMatchMode",
    "LeafRecord",
    "Linearization",
    "NodeRecord",
    "Occurrence",
    "OccurrenceGroup",
    "PathLinearizer",
    "RepetitionGrouper",
]
