"""Messages and stored state for hash-locked atomic swaps."""