"""Private implementation of the encrypted storage layer. Import from encrypt_storage.storage instead."""
