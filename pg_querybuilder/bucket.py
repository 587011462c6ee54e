class ParamBucket:
    """Ordered store of bound values. Position N holds the value for `$N`."""

    def __init__(self):
        self._content = []

    def push(self, value):
        self._content.append(value)
        return len(self._content)

    def values(self):
        return list(self._content)

    def __len__(self):
        return len(self._content)

    def __repr__(self):
        return f"<ParamBucket {self._content!r}>"
