import argparse
import os
import sys

from dotenv import load_dotenv

from school_data import (
    SchoolDataError,
    format_department,
    faculty_table,
    get_array_element,
    get_courses,
    get_string_element,
    iter_faculty,
    load_department,
)

# Load environment variables
load_dotenv()

# File Constants
FILE_DEFAULT = "compsci.json"

def default_filename():
    """Input file from SCHOOL_DATA_FILE, else FILE_DEFAULT."""
    filename = os.getenv("SCHOOL_DATA_FILE", "").strip("'\"")
    return filename or FILE_DEFAULT

def summarize(data):
    """Returns (listed, skipped, courses) counts for the Faculty list."""
    entries = get_array_element(data, "Faculty") or []
    named = [p for p in iter_faculty(data) if get_string_element(p, "name") is not None]
    courses = sum(len(get_courses(p)) for p in named)
    return len(named), len(entries) - len(named), courses

def step_report(data):
    """Print the plain-text report to stdout."""
    for line in format_department(data):
        print(line)

def step_summary(data):
    """Print faculty and course counts to stderr."""
    listed, skipped, courses = summarize(data)
    print(f"Listed {listed} faculty ({skipped} skipped), {courses} courses", file=sys.stderr)

def step_csv(data):
    """Print the faculty table as CSV to stdout."""
    df = faculty_table(data)
    df.to_csv(sys.stdout, index=False)

def main(argv=None):
    parser = argparse.ArgumentParser(description="Print a department's faculty report from a JSON file")
    parser.add_argument("filename", nargs="?", default=None, help=f"Department JSON file (default: $SCHOOL_DATA_FILE or {FILE_DEFAULT})")
    parser.add_argument("--csv", action="store_true", help="Print the faculty list as CSV instead of the text report")
    parser.add_argument("--summary", action="store_true", help="Print faculty and course counts to stderr after the output")

    args = parser.parse_args(argv)
    filename = args.filename or default_filename()

    try:
        data = load_department(filename)
    except SchoolDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.csv:
        step_csv(data)
    else:
        step_report(data)

    if args.summary:
        step_summary(data)

    sys.exit(0)

if __name__ == "__main__":
    main()
