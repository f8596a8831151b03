"""Task API: user and task management over a relational store."""
