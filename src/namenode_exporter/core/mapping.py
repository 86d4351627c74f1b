"""NameNode metric descriptors and the bean-to-metric mapping table."""

from namenode_exporter.core.beans import BeanMapping, Coercion, FieldRule, MappingTable
from namenode_exporter.core.metrics import counter_descriptor, gauge_descriptor

NAMESPACE = "namenode"

RUNTIME_BEAN = "java.lang:type=Runtime"
STATUS_BEAN = "Hadoop:service=NameNode,name=NameNodeStatus"
FS_NAMESYSTEM_BEAN = "Hadoop:service=NameNode,name=FSNamesystem"
FS_NAMESYSTEM_STATE_BEAN = "Hadoop:service=NameNode,name=FSNamesystemState"
INFO_BEAN = "Hadoop:service=NameNode,name=NameNodeInfo"
JVM_METRICS_BEAN = "Hadoop:service=NameNode,name=JvmMetrics"

# namenode server health metrics
UP = gauge_descriptor(NAMESPACE, "", "up", "Could the namenode be reached.")
UPTIME = gauge_descriptor(
    NAMESPACE, "", "uptime_seconds", "Number of seconds since the namenode started."
)
STATE = gauge_descriptor(
    NAMESPACE, "", "state", "Indicate namenode state (0 - standby, 1 - active)."
)
FS_OPERATIONAL = gauge_descriptor(
    NAMESPACE, "", "fs_operational", "The filesystem state of this namenode."
)
SAFEMODE_ON = gauge_descriptor(
    NAMESPACE, "", "safemode_on", "The safemode state of this namenode."
)
DATA_NODES_LIVE = gauge_descriptor(
    NAMESPACE, "", "data_nodes_live", "The number of live datanodes in this DFS."
)
DATA_NODES_DEAD = gauge_descriptor(
    NAMESPACE, "", "data_nodes_dead", "The number of dead datanodes in this DFS."
)

# dfs capacity metrics
DFS_FILES_TOTAL = gauge_descriptor(
    NAMESPACE, "dfs", "files_total", "Total number of files in DFS."
)
DFS_PERCENT_USED = gauge_descriptor(
    NAMESPACE, "dfs", "percent_used", "Percentage of DFS capacity in use."
)
DFS_PERCENT_REMAINING = gauge_descriptor(
    NAMESPACE, "dfs", "percent_remaining", "Percentage of DFS capacity remaining."
)
DFS_CAPACITY_BYTES_TOTAL = gauge_descriptor(
    NAMESPACE,
    "dfs",
    "capacity_bytes_total",
    "Total configured DFS storage capacity in bytes.",
)
DFS_CAPACITY_BYTES_USED = gauge_descriptor(
    NAMESPACE, "dfs", "capacity_bytes_used", "The usage of the DFS in bytes."
)
DFS_CAPACITY_BYTES_REMAINING = gauge_descriptor(
    NAMESPACE,
    "dfs",
    "capacity_bytes_remaining",
    "The remaining capacity of the DFS in bytes.",
)
DFS_NON_DFS_BYTES_USED = gauge_descriptor(
    NAMESPACE, "dfs", "non_dfs_bytes_used", "Non-DFS usage in bytes."
)

# dfs block metrics
DFS_BLOCKS_TOTAL = gauge_descriptor(
    NAMESPACE, "dfs", "blocks_total", "Total blocks in DFS."
)
DFS_BLOCKS_UNDER_REPLICATED = gauge_descriptor(
    NAMESPACE, "dfs", "blocks_under_replicated", "Under replicated blocks in DFS."
)
DFS_BLOCKS_PENDING_REPLICATION = gauge_descriptor(
    NAMESPACE,
    "dfs",
    "blocks_pending_replication",
    "Blocks waiting for a replication to be confirmed.",
)
DFS_BLOCKS_SCHEDULED_REPLICATION = gauge_descriptor(
    NAMESPACE,
    "dfs",
    "blocks_scheduled_replication",
    "Blocks scheduled for replication.",
)
DFS_BLOCKS_POSTPONED_MISREPLICATED = gauge_descriptor(
    NAMESPACE,
    "dfs",
    "blocks_postponed_misreplicated",
    "Misreplicated blocks whose processing is postponed.",
)
DFS_BLOCKS_PENDING_DELETION = gauge_descriptor(
    NAMESPACE, "dfs", "blocks_pending_deletion", "Blocks waiting to be deleted."
)
DFS_BLOCKS_MISSING = gauge_descriptor(
    NAMESPACE, "dfs", "blocks_missing", "Missing blocks in DFS."
)
DFS_BLOCKS_CORRUPT = gauge_descriptor(
    NAMESPACE, "dfs", "blocks_corrupt", "Corrupted blocks in DFS."
)
DFS_BLOCKS_EXCESS = gauge_descriptor(
    NAMESPACE, "dfs", "blocks_excess", "Excess blocks in DFS."
)
DFS_BLOCK_POOL_BYTES_USED = gauge_descriptor(
    NAMESPACE,
    "dfs",
    "block_pool_bytes_used",
    "Storage used by the block pool of this namenode in bytes.",
)
DFS_BLOCK_POOL_PERCENT_USED = gauge_descriptor(
    NAMESPACE,
    "dfs",
    "block_pool_percent_used",
    "Percentage of DFS capacity used by the block pool of this namenode.",
)

# namenode jvm metrics
JVM_LOG_FATAL = counter_descriptor(
    NAMESPACE, "jvm", "log_fatal", "Number of FATAL events logged by the JVM."
)
JVM_LOG_ERROR = counter_descriptor(
    NAMESPACE, "jvm", "log_error", "Number of ERROR events logged by the JVM."
)
JVM_LOG_WARN = counter_descriptor(
    NAMESPACE, "jvm", "log_warn", "Number of WARN events logged by the JVM."
)
JVM_LOG_INFO = counter_descriptor(
    NAMESPACE, "jvm", "log_info", "Number of INFO events logged by the JVM."
)
JVM_MEM_HEAP_MEGABYTES_USED = gauge_descriptor(
    NAMESPACE, "jvm", "mem_heap_megabytes_used", "Heap memory used in megabytes."
)
JVM_MEM_HEAP_MEGABYTES_COMMITTED = gauge_descriptor(
    NAMESPACE,
    "jvm",
    "mem_heap_megabytes_committed",
    "Heap memory committed in megabytes.",
)
JVM_MEM_NON_HEAP_MEGABYTES_USED = gauge_descriptor(
    NAMESPACE,
    "jvm",
    "mem_non_heap_megabytes_used",
    "Non-heap memory used in megabytes.",
)
JVM_MEM_NON_HEAP_MEGABYTES_COMMITTED = gauge_descriptor(
    NAMESPACE,
    "jvm",
    "mem_non_heap_megabytes_committed",
    "Non-heap memory committed in megabytes.",
)
JVM_THREADS_NEW = gauge_descriptor(
    NAMESPACE, "jvm", "threads_new", "Number of threads in NEW state."
)
JVM_THREADS_RUNNABLE = gauge_descriptor(
    NAMESPACE, "jvm", "threads_runnable", "Number of threads in RUNNABLE state."
)
JVM_THREADS_BLOCKED = gauge_descriptor(
    NAMESPACE, "jvm", "threads_blocked", "Number of threads in BLOCKED state."
)
JVM_THREADS_WAITING = gauge_descriptor(
    NAMESPACE, "jvm", "threads_waiting", "Number of threads in WAITING state."
)
JVM_THREADS_TIMED_WAITING = gauge_descriptor(
    NAMESPACE,
    "jvm",
    "threads_timed_waiting",
    "Number of threads in TIMED_WAITING state.",
)
JVM_THREADS_TERMINATED = gauge_descriptor(
    NAMESPACE,
    "jvm",
    "threads_terminated",
    "Number of threads in TERMINATED state.",
)

NAMENODE_TABLE = MappingTable(
    [
        BeanMapping(RUNTIME_BEAN, (FieldRule("Uptime", UPTIME),)),
        BeanMapping(
            STATUS_BEAN,
            (FieldRule("State", STATE, Coercion.EQUALS, expected="active"),),
        ),
        BeanMapping(
            FS_NAMESYSTEM_BEAN,
            (
                FieldRule("BlocksTotal", DFS_BLOCKS_TOTAL),
                FieldRule("UnderReplicatedBlocks", DFS_BLOCKS_UNDER_REPLICATED),
                FieldRule("PendingReplicationBlocks", DFS_BLOCKS_PENDING_REPLICATION),
                FieldRule(
                    "ScheduledReplicationBlocks", DFS_BLOCKS_SCHEDULED_REPLICATION
                ),
                FieldRule(
                    "PostponedMisreplicatedBlocks", DFS_BLOCKS_POSTPONED_MISREPLICATED
                ),
                FieldRule("PendingDeletionBlocks", DFS_BLOCKS_PENDING_DELETION),
                FieldRule("MissingBlocks", DFS_BLOCKS_MISSING),
                FieldRule("CorruptBlocks", DFS_BLOCKS_CORRUPT),
                FieldRule("ExcessBlocks", DFS_BLOCKS_EXCESS),
            ),
        ),
        BeanMapping(
            FS_NAMESYSTEM_STATE_BEAN,
            (
                FieldRule(
                    "FSState", FS_OPERATIONAL, Coercion.EQUALS, expected="Operational"
                ),
                FieldRule("NumLiveDataNodes", DATA_NODES_LIVE),
                FieldRule("NumDeadDataNodes", DATA_NODES_DEAD),
                FieldRule("FilesTotal", DFS_FILES_TOTAL),
                FieldRule("CapacityTotal", DFS_CAPACITY_BYTES_TOTAL),
                FieldRule("CapacityUsed", DFS_CAPACITY_BYTES_USED),
                FieldRule("CapacityRemaining", DFS_CAPACITY_BYTES_REMAINING),
            ),
        ),
        BeanMapping(
            INFO_BEAN,
            (
                FieldRule("Safemode", SAFEMODE_ON, Coercion.NON_EMPTY),
                FieldRule("PercentUsed", DFS_PERCENT_USED),
                FieldRule("PercentRemaining", DFS_PERCENT_REMAINING),
                FieldRule("NonDfsUsedSpace", DFS_NON_DFS_BYTES_USED),
                FieldRule("BlockPoolUsedSpace", DFS_BLOCK_POOL_BYTES_USED),
                FieldRule("PercentBlockPoolUsed", DFS_BLOCK_POOL_PERCENT_USED),
            ),
        ),
        BeanMapping(
            JVM_METRICS_BEAN,
            (
                FieldRule("LogFatal", JVM_LOG_FATAL),
                FieldRule("LogError", JVM_LOG_ERROR),
                FieldRule("LogWarn", JVM_LOG_WARN),
                FieldRule("LogInfo", JVM_LOG_INFO),
                FieldRule("MemHeapUsedM", JVM_MEM_HEAP_MEGABYTES_USED),
                FieldRule("MemHeapCommittedM", JVM_MEM_HEAP_MEGABYTES_COMMITTED),
                FieldRule("MemNonHeapUsedM", JVM_MEM_NON_HEAP_MEGABYTES_USED),
                FieldRule(
                    "MemNonHeapCommittedM", JVM_MEM_NON_HEAP_MEGABYTES_COMMITTED
                ),
                FieldRule("ThreadsNew", JVM_THREADS_NEW),
                FieldRule("ThreadsRunnable", JVM_THREADS_RUNNABLE),
                FieldRule("ThreadsBlocked", JVM_THREADS_BLOCKED),
                FieldRule("ThreadsWaiting", JVM_THREADS_WAITING),
                FieldRule("ThreadsTimedWaiting", JVM_THREADS_TIMED_WAITING),
                FieldRule("ThreadsTerminated", JVM_THREADS_TERMINATED),
            ),
        ),
    ]
)
