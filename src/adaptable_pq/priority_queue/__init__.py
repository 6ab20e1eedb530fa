from adaptable_pq.priority_queue.heap_type import HeapType, max_comparator, min_comparator
from adaptable_pq.priority_queue.priority_queue_heap import DEFAULT_CAPACITY, PriorityQueueHeap
