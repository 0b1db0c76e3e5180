class _NotFound:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


class ChainList:
    """Singly linked key/value chain holding one bucket's entries."""

    class Node:
        def __init__(self, key, value):
            self.key = key
            self.value = value
            self.next = None

    def __init__(self):
        self._head = None

    def append(self, key, value):
        """Insert at the tail, or overwrite an existing key in place.

        Returns True if the key was already present, False if a node was added.
        """
        if self._head is None:
            self._head = self.Node(key, value)
            return False
        current = self._head
        while True:
            if current.key == key:
                current.value = value
                return True
            if current.next is None:
                break
            current = current.next
        current.next = self.Node(key, value)
        return False

    def get_value(self, key):
        current = self._head
        while current is not None:
            if current.key == key:
                return current.value
            current = current.next
        return NOT_FOUND

    def contains(self, key):
        current = self._head
        while current is not None:
            if current.key == key:
                return True
            current = current.next
        return False

    def remove(self, key):
        prev = None
        current = self._head
        while current is not None:
            if current.key == key:
                if prev is None:
                    self._head = current.next
                else:
                    prev.next = current.next
                return True
            prev = current
            current = current.next
        return False

    def find(self, value):
        index = 0
        current = self._head
        while current is not None:
            if current.value == value:
                return index
            index += 1
            current = current.next
        return None

    def size(self):
        count = 0
        current = self._head
        while current is not None:
            count += 1
            current = current.next
        return count

    def is_empty(self):
        return self._head is None

    def __iter__(self):
        current = self._head
        while current is not None:
            yield current.key, current.value
            current = current.next

    def __len__(self):
        return self.size()
