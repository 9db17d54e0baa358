import operator

from .comparing import compare_by_key, compare_fields


class DiffConfig:
    """Pair of tri-state predicates to pass around.

    is_same decides whether two items represent the same logical item,
    is_equal whether two such items have the same content.
    """

    def __init__(self, *, is_same=None, is_equal=None):
        if is_same is None:
            is_same = operator.__eq__

        if is_equal is None:
            is_equal = operator.__eq__

        self.is_same = is_same
        self.is_equal = is_equal

    @classmethod
    def from_options(cls, id_key=None, compare_fields_=None, strict=True):
        """Build predicates from the command line/config file options.

        Without an id_key items are identified by whole-value equality,
        without compare_fields their content is compared as a whole.
        """
        is_same = compare_by_key(id_key, strict) if id_key else None
        is_equal = compare_fields(compare_fields_) if compare_fields_ else None
        return cls(is_same=is_same, is_equal=is_equal)

    def __copy__(self):
        return DiffConfig(
            is_same=self.is_same,
            is_equal=self.is_equal,
        )
