"""
Load a department JSON file and format it as a plain-text faculty report.

Expected document shape:
    {
        "School": "...",
        "Department": "...",
        "Faculty": [
            {"name": "...", "email": "...",
             "office": {"building": "...", "room": "..."},
             "courses_taught": ["...", ...]}
        ]
    }
Only School and Department are required. Everything else is optional and
wrong-typed values are treated as missing.
"""
import json

import pandas as pd

NAME_INDENT = "    "
FIELD_INDENT = "        "
COURSE_INDENT = "            "

TABLE_COLUMNS = ["school", "department", "name", "email",
                 "office.building", "office.room", "courses"]

class SchoolDataError(Exception):
    """Fatal problem with the input file. str() is the message shown to the user."""

class FileReadError(SchoolDataError):
    def __init__(self, filename):
        super().__init__(f"Error reading {filename}")
        self.filename = filename

class ParseError(SchoolDataError):
    def __init__(self):
        super().__init__("Invalid JSON data")

class SchemaError(SchoolDataError):
    def __init__(self, field):
        super().__init__(f"Error reading element '{field}'")
        self.field = field

def get_file_contents(filename):
    """
    Returns the entire contents of filename as a string.
    Raises FileReadError if the file is missing, unreadable or empty.
    """
    try:
        with open(filename, "r", encoding="utf-8") as f:
            contents = f.read()
    except UnicodeDecodeError as e:
        raise ParseError() from e
    except OSError as e:
        raise FileReadError(filename) from e

    # A zero-byte file is a short read, not an empty document
    if not contents:
        raise FileReadError(filename)
    return contents

def parse_document(text):
    """Converts text to JSON values. Raises ParseError on bad syntax."""
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise ParseError() from e

def get_string_element(obj, name):
    """
    Returns obj[name] only if it exists and is a string, otherwise None.
    Example: get_string_element({"room": 101}, "room") -> None
    """
    if not isinstance(obj, dict):
        return None
    value = obj.get(name)
    if isinstance(value, str):
        return value
    return None

def get_array_element(obj, name):
    """Returns obj[name] only if it exists and is a list, otherwise None."""
    if not isinstance(obj, dict):
        return None
    value = obj.get(name)
    if isinstance(value, list):
        return value
    return None

def get_office(person):
    """Returns (building, room), or None unless both are present."""
    office = person.get("office") if isinstance(person, dict) else None
    building = get_string_element(office, "building")
    room = get_string_element(office, "room")
    if building is None or room is None:
        return None
    return building, room

def get_courses(person):
    """
    Returns the string entries of courses_taught, in order.
    Non-string entries are skipped. A null entry ends the list early.
    """
    courses = []
    for course in get_array_element(person, "courses_taught") or []:
        if course is None:
            break
        if isinstance(course, str):
            courses.append(course)
    return courses

def format_professor(person):
    """
    Formats one professor as report lines:
        <name>
            Email: <email>
            Office: <building> <room>
            Teaches:
                <course1>
                ...
    Email and Office lines are dropped when missing. Without a name the
    record makes no sense, so nothing at all is returned for it.
    """
    name = get_string_element(person, "name")
    if name is None:
        return []

    lines = [f"{NAME_INDENT}{name}"]

    email = get_string_element(person, "email")
    if email is not None:
        lines.append(f"{FIELD_INDENT}Email: {email}")

    office = get_office(person)
    if office is not None:
        building, room = office
        lines.append(f"{FIELD_INDENT}Office: {building} {room}")

    lines.append(f"{FIELD_INDENT}Teaches:")
    for course in get_courses(person):
        lines.append(f"{COURSE_INDENT}{course}")

    return lines

def print_professor(person):
    for line in format_professor(person):
        print(line)

def get_required_fields(data):
    """Returns (school, department). Raises SchemaError naming the first one missing."""
    school = get_string_element(data, "School")
    if school is None:
        raise SchemaError("School")

    department = get_string_element(data, "Department")
    if department is None:
        raise SchemaError("Department")

    return school, department

def iter_faculty(data):
    """Yields faculty entries that are objects; nulls and other values are skipped."""
    for professor in get_array_element(data, "Faculty") or []:
        if isinstance(professor, dict):
            yield professor

def format_department(data):
    """
    Formats the whole document. The first line is "<School>: <Department>",
    followed by each professor in Faculty order.
    """
    school, department = get_required_fields(data)

    lines = [f"{school}: {department}"]
    for professor in iter_faculty(data):
        lines.extend(format_professor(professor))
    return lines

def load_department(filename):
    """Reads, parses and checks the required fields of a department file."""
    data = parse_document(get_file_contents(filename))
    get_required_fields(data)
    return data

def professor_record(person, school, department):
    """
    Flat record of one professor for tabular export, or None if unnamed.
    Example:
        {"school": "S", "department": "D", "name": "Ada", "email": None,
         "office": {"building": "Hall", "room": "1"}, "courses": "CS 1; CS 2"}
    """
    name = get_string_element(person, "name")
    if name is None:
        return None

    record = {
        "school": school,
        "department": department,
        "name": name,
        "email": get_string_element(person, "email"),
        "courses": "; ".join(get_courses(person)),
    }

    office = get_office(person)
    if office is not None:
        record["office"] = {"building": office[0], "room": office[1]}

    return record

def faculty_table(data):
    """One row per named professor, office flattened into office.* columns."""
    school, department = get_required_fields(data)

    records = []
    for professor in iter_faculty(data):
        record = professor_record(professor, school, department)
        if record is not None:
            records.append(record)

    df = pd.json_normalize(records)
    return df.reindex(columns=TABLE_COLUMNS)
