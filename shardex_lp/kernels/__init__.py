"""
Kernel layer.

Integer-only kernels whose rounding must match the on-chain pool program
bit-for-bit. Higher layers (`shardex_lp.core`) add policy, validation and
quote assembly on top of these functions.
"""
