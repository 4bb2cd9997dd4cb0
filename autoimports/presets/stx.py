"""STX reactive primitives and utilities."""

from __future__ import annotations

from autoimports.config import InlinePreset

STX = InlinePreset(
    source="stx",
    imports=[
        # Signals
        "state",
        "derived",
        "effect",
        "batch",
        "untrack",
        "peek",
        "isSignal",
        "isDerived",

        # Lifecycle
        "onMount",
        "onDestroy",

        # Vue-style reactivity
        "ref",
        "reactive",
        "computed",
        "watch",
        "watchEffect",
        "watchMultiple",

        # Vue-style lifecycle hooks
        "onBeforeMount",
        "onMounted",
        "onBeforeUpdate",
        "onUpdated",
        "onBeforeUnmount",
        "onUnmounted",

        # Components
        "defineProps",
        "withDefaults",
        "defineEmits",
        "defineExpose",

        # Stores
        "createStore",
        "defineStore",
        "action",
        "createSelector",
    ],
)
