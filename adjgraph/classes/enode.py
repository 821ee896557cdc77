"""
Adjacency record for the linked-list graph representation.
"""


class pyenode:
    """
    One outgoing edge record in a vertex's adjacency list.

    Records form a singly linked chain: the graph holds the head of each
    vertex's chain and every record holds the rest. A record is created by
    edge insertion and is never modified afterwards.

    Attributes:
        dest: Destination vertex index
        next: Next record in the same vertex's list, or None
        lEdgeID: Insertion index of the undirected edge; the two records of
            one edge share it
    """

    __slots__ = ('dest', 'next', 'lEdgeID')

    def __init__(self, dest: int, next: "pyenode" = None, lEdgeID: int = -1):
        self.dest = dest
        self.next = next
        self.lEdgeID = lEdgeID

    def __iter__(self):
        # walk this record and everything after it
        cur = self
        while cur is not None:
            yield cur
            cur = cur.next

    def __repr__(self):
        return f"pyenode(dest={self.dest}, lEdgeID={self.lEdgeID})"
