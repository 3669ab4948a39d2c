# Contacts application layer
