"""Disk image storage operations backed by hdiutil."""
