"""
Core application code. This is the package that interfaces between the
presentation layer (Flask etc.) and the database.

The dependency graph should look like:

Presentation -> Core
Admin -> Core
Core -> Database

Note that these are all one-way dependencies, and that they all include Core.
"""
