"""
Build the org chart from the employee spreadsheet.

    python build_org_chart.py employees.xlsx --company УК --format pdf
    python build_org_chart.py employees.xlsx --format html --open
"""

from org_chart.cli import main

if __name__ == "__main__":
    main()
