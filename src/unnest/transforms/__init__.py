from unnest.transforms.base import Transform
from unnest.transforms.nesting import NestingFlattenTransform, flatten_body, flatten_nesting

BUILTIN_TRANSFORMS: list[Transform] = [
    NestingFlattenTransform(),
]


def apply_transforms(nodes, custom_transforms=None):
    """Apply all built-in transforms (and any custom ones) to *nodes*."""
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        nodes = t.apply(nodes)
    return nodes


__all__ = [
    "Transform",
    "NestingFlattenTransform",
    "BUILTIN_TRANSFORMS",
    "apply_transforms",
    "flatten_body",
    "flatten_nesting",
]
