import os
import importlib

# Automatically import every table module so SQLModel.metadata knows about it
tables_path = os.path.join(os.path.dirname(__file__), "tables")
for file in sorted(os.listdir(tables_path)):
    if file.endswith(".py") and file != "__init__.py":
        module_name = file[:-3]  # Remove ".py" extension
        importlib.import_module(f"{__name__}.tables.{module_name}")
