class OutputBuffer:
    """Growable HTML output that closing handlers may inspect and rewrite.

    Chunks are joined lazily; reads that need the full text collapse the
    chunk list into a single string first.
    """

    __slots__ = ("_chunks", "_length")

    def __init__(self, initial=""):
        self._chunks = [initial] if initial else []
        self._length = len(initial)

    def __len__(self):
        return self._length

    def __str__(self):
        return self.getvalue()

    def __repr__(self):
        return f"OutputBuffer({self.getvalue()!r})"

    def append(self, chunk):
        if chunk:
            self._chunks.append(chunk)
            self._length += len(chunk)

    def getvalue(self):
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def endswith(self, suffix):
        if not suffix:
            return True
        if len(suffix) > self._length:
            return False
        return self._tail(len(suffix)) == suffix

    def read_from(self, position):
        return self.getvalue()[position:]

    def truncate(self, position):
        if position >= self._length:
            return
        data = self.getvalue()[:max(position, 0)]
        self._chunks = [data] if data else []
        self._length = len(data)

    def _tail(self, count):
        gathered = []
        needed = count
        for chunk in reversed(self._chunks):
            if len(chunk) >= needed:
                gathered.append(chunk[len(chunk) - needed:])
                break
            gathered.append(chunk)
            needed -= len(chunk)
        return "".join(reversed(gathered))
