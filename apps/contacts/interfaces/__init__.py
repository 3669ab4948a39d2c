# Contacts interfaces
