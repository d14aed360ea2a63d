"""
Utilities - flat-file ingestion of student records.
"""
