"""HTTP Basic authentication gate backed by a bcrypt password file."""
