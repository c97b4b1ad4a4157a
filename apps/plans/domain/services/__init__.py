from .allocator import DailyTargetAllocator, allocate

__all__ = ['DailyTargetAllocator', 'allocate']
