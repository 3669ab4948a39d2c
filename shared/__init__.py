# Shared kernel
