# Bounded contexts
