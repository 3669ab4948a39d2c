# Contacts bounded context
