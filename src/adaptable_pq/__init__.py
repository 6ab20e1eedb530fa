from adaptable_pq.errors import HeapError, InvalidArgument, OutOfRange
from adaptable_pq.handle import Handle
from adaptable_pq.array_list import ExpandingArrayList
from adaptable_pq.priority_queue import HeapType, PriorityQueueHeap
from adaptable_pq.logger import init_logger, set_log_level
