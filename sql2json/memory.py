import sys
from typing import Dict

import psutil


def memory_usage() -> Dict[str, float]:
    """RSS / VMS of the current process in MB."""
    mem_info = psutil.Process().memory_info()
    return {
        "rss_mb": round(mem_info.rss / 1024 / 1024, 2),
        "vms_mb": round(mem_info.vms / 1024 / 1024, 2),
    }


def log_memory_usage(enabled: bool, file=sys.stdout):
    if not enabled:
        return
    used = memory_usage()
    print(f"Memory: RSS {used['rss_mb']} MB, VMS {used['vms_mb']} MB", file=file)
