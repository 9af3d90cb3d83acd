"""
Demo data for the shared connector collections.

Each collection is only filled when it is empty, so seeding is safe to run
on every startup. Generated faculty, students and schedules draw from the
given random generator; pass a seeded one for reproducible data.
"""
import random
from typing import List, Optional

from portal.services.connector import ConnectorService
from portal.stores.collection import Record


DEPARTMENT_NAMES = [
    "Computer Science Engineering",
    "Electrical Engineering",
    "Mechanical Engineering",
    "Civil Engineering",
    "Electronics & Communication",
]

CITIES = ["Delhi", "Mumbai", "Bangalore", "Chennai", "Kolkata", "Hyderabad", "Pune"]
STATES = ["Maharashtra", "Karnataka", "Tamil Nadu", "Delhi", "West Bengal", "Telangana", "Gujarat"]
SECTIONS = ["1", "2", "3", "4", "5", "6", "7"]
BATCH_NAMES = ["CS 2020-24", "CS 2021-25", "CS 2022-26", "CS 2023-27", "EE 2020-24", "EE 2021-25"]

MOCK_DEPARTMENTS: List[Record] = [
    {"id": "DEPT001", "code": "CSE", "name": "Computer Science Engineering",
     "description": "Algorithms, programming languages and computing systems.",
     "headName": "Dr. Rajesh Sharma", "headId": "FAC1001", "establishedYear": 1995,
     "facultyCount": 25, "studentCount": 450, "courses": 35, "batches": 4},
    {"id": "DEPT002", "code": "EEE", "name": "Electrical Engineering",
     "description": "Electricity, electronics and electromagnetism for power systems.",
     "headName": "Dr. Suresh Patel", "headId": "FAC1004", "establishedYear": 1990,
     "facultyCount": 20, "studentCount": 380, "courses": 30, "batches": 4},
    {"id": "DEPT003", "code": "ME", "name": "Mechanical Engineering",
     "description": "Design, production and operation of machinery and tools.",
     "headName": "Dr. Ramesh Reddy", "headId": "FAC1006", "establishedYear": 1985,
     "facultyCount": 22, "studentCount": 420, "courses": 32, "batches": 4},
    {"id": "DEPT004", "code": "CE", "name": "Civil Engineering",
     "description": "Design, construction and maintenance of the built environment.",
     "headName": "Dr. Mahesh Mishra", "headId": "FAC1007", "establishedYear": 1985,
     "facultyCount": 18, "studentCount": 350, "courses": 28, "batches": 4},
    {"id": "DEPT005", "code": "ECE", "name": "Electronics & Communication",
     "description": "Electronic devices, circuits and communication systems.",
     "headName": "Dr. Dinesh Joshi", "headId": "FAC1008", "establishedYear": 1992,
     "facultyCount": 21, "studentCount": 400, "courses": 30, "batches": 4},
]

# (id, code, name, credits, department, semester, faculty id, faculty name, syllabus)
_COURSE_ROWS = [
    ("CRS1001", "CS101", "Introduction to Computer Science", 4, "Computer Science Engineering", 1,
     "FAC1001", "Dr. Rajesh Sharma",
     ["Introduction to Computing", "Algorithms and Flowcharts", "Programming Basics",
      "Data Types and Variables", "Control Structures"]),
    ("CRS1002", "CS201", "Data Structures", 4, "Computer Science Engineering", 3,
     "FAC1002", "Dr. Suresh Patel",
     ["Arrays and Linked Lists", "Stacks and Queues", "Trees and Graphs", "Hashing",
      "Advanced Data Structures"]),
    ("CRS1003", "CS301", "Algorithms", 4, "Computer Science Engineering", 4,
     "FAC1003", "Dr. Mahesh Gupta",
     ["Algorithm Analysis", "Divide and Conquer", "Greedy Algorithms", "Dynamic Programming",
      "NP-Completeness"]),
    ("CRS1004", "EE101", "Basic Electrical Engineering", 3, "Electrical Engineering", 1,
     "FAC1004", "Dr. Anil Kumar",
     ["Circuit Theory", "Network Analysis", "AC Fundamentals", "Transformers", "Electrical Machines"]),
    ("CRS1005", "EE201", "Analog Electronics", 4, "Electrical Engineering", 3,
     "FAC1005", "Dr. Harish Singh",
     ["Semiconductor Devices", "Diodes and Applications", "BJT and FET", "Amplifiers",
      "Operational Amplifiers"]),
    ("CRS1006", "ME101", "Engineering Mechanics", 3, "Mechanical Engineering", 1,
     "FAC1006", "Dr. Ramesh Reddy",
     ["Force Systems", "Equilibrium", "Kinematics", "Dynamics", "Friction"]),
    ("CRS1007", "CE101", "Engineering Drawing", 3, "Civil Engineering", 1,
     "FAC1007", "Dr. Satish Mishra",
     ["Orthographic Projection", "Isometric Views", "Sectional Views", "Dimensioning",
      "Computer Aided Drawing"]),
    ("CRS1008", "EC101", "Digital Electronics", 4, "Electronics & Communication", 2,
     "FAC1008", "Dr. Dinesh Joshi",
     ["Number Systems", "Boolean Algebra", "Logic Gates", "Combinational Circuits",
      "Sequential Circuits"]),
]

MOCK_COURSES: List[Record] = [
    {"id": cid, "code": code, "name": name, "description": f"Core course: {name}", "credits": credits,
     "department": dept, "semester": semester, "facultyId": fid, "facultyName": fname,
     "status": "active", "syllabus": syllabus}
    for cid, code, name, credits, dept, semester, fid, fname, syllabus in _COURSE_ROWS
]

# (id, name, start, end, department, section count, course ids, students)
_BATCH_ROWS = [
    ("BATCH001", "CS 2020-24", 2020, 2024, "Computer Science Engineering", 4, ["CRS1001", "CRS1002", "CRS1003"], 120),
    ("BATCH002", "CS 2021-25", 2021, 2025, "Computer Science Engineering", 3, ["CRS1001", "CRS1002"], 90),
    ("BATCH003", "CS 2022-26", 2022, 2026, "Computer Science Engineering", 4, ["CRS1001"], 120),
    ("BATCH004", "CS 2023-27", 2023, 2027, "Computer Science Engineering", 3, ["CRS1001"], 90),
    ("BATCH005", "EE 2020-24", 2020, 2024, "Electrical Engineering", 2, ["CRS1004", "CRS1005"], 60),
    ("BATCH006", "EE 2021-25", 2021, 2025, "Electrical Engineering", 2, ["CRS1004"], 60),
]

MOCK_BATCHES: List[Record] = [
    {"id": bid, "name": name, "startYear": start, "endYear": end, "department": dept,
     "sections": SECTIONS[:sections], "courseIds": course_ids, "studentCount": students,
     "status": "active"}
    for bid, name, start, end, dept, sections, course_ids, students in _BATCH_ROWS
]


def _address(rng: random.Random) -> Record:
    return {
        "street": f"{rng.randint(1, 999)}, {rng.choice(['Main', 'Park'])} Street",
        "city": rng.choice(CITIES),
        "state": rng.choice(STATES),
        "pincode": str(rng.randint(100000, 999999)),
    }


def generate_mock_faculty(count: int, rng: Optional[random.Random] = None) -> List[Record]:
    rng = rng or random.Random()
    designations = ["Professor", "Associate Professor", "Assistant Professor", "Lecturer",
                    "Visiting Faculty", "Professor Emeritus", "Department Head"]
    first_names = ["Anil", "Rajesh", "Suresh", "Mahesh", "Ramesh", "Harish",
                   "Prakash", "Dinesh", "Satish", "Ravi", "Ajay", "Vijay"]
    last_names = ["Sharma", "Gupta", "Patel", "Singh", "Kumar", "Verma",
                  "Mishra", "Joshi", "Yadav", "Reddy", "Agarwal", "Iyer"]
    specializations = ["Artificial Intelligence", "Machine Learning", "Database Systems",
                       "Computer Networks", "Power Systems", "Electronics", "Structural Engineering",
                       "Thermal Engineering", "Communication Systems", "VLSI Design",
                       "Software Engineering", "Cybersecurity"]
    qualifications = ["Ph.D.", "M.Tech.", "M.E.", "M.S.", "MBA", "B.Tech."]
    course_names = ["Data Structures", "Algorithms", "Database Management", "Computer Networks",
                    "Operating Systems", "Software Engineering", "Machine Learning",
                    "Artificial Intelligence", "Digital Electronics", "Power Systems",
                    "Control Systems", "Structural Analysis"]

    faculty = []
    for index in range(count):
        name = f"Dr. {rng.choice(first_names)} {rng.choice(last_names)}"
        batches = []
        for _ in range(rng.randint(1, 3)):
            batch_index = rng.randrange(len(BATCH_NAMES))
            batches.append({"batchId": f"BATCH{1000 + batch_index}", "batchName": BATCH_NAMES[batch_index],
                            "section": rng.choice(SECTIONS)})
        faculty.append({
            "id": f"FAC{1000 + index}",
            "employeeId": f"EMP{2000 + index}",
            "name": name,
            "email": f"{name.lower().replace('dr. ', '').replace(' ', '.')}@faculty.edu",
            "phone": f"+91 {rng.randint(7000000000, 9999999999)}",
            "address": _address(rng),
            "department": rng.choice(DEPARTMENT_NAMES),
            "designation": rng.choice(designations),
            "specialization": rng.choice(specializations),
            # Every faculty member holds a Ph.D.
            "qualifications": ["Ph.D.", *rng.choices(qualifications, k=rng.randint(1, 2))],
            "joinDate": f"{rng.randint(2005, 2022)}-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}",
            "assignedBatches": batches,
            "assignedCourses": [
                {"courseId": f"CRS{1000 + rng.randrange(100)}", "courseName": rng.choice(course_names),
                 "semester": rng.randint(1, 8)}
                for _ in range(rng.randint(1, 4))
            ],
            "status": rng.choices(["active", "on leave", "sabbatical", "retired"],
                                  weights=[0.8, 0.1, 0.05, 0.05])[0],
        })
    return faculty


def generate_mock_students(count: int, rng: Optional[random.Random] = None) -> List[Record]:
    rng = rng or random.Random()
    batches = ["2020-24", "2021-25", "2022-26", "2023-27"]
    first_names = ["Virat", "Rohit", "Hardik", "Rishabh", "Suryakumar", "Ravindra",
                   "Jasprit", "Shreyas", "Shubman", "Arshdeep", "Yuzvendra", "Mohammed"]
    last_names = ["Sharma", "Kohli", "Pandya", "Pant", "Yadav", "Jadeja", "Bumrah",
                  "Iyer", "Gill", "Singh", "Chahal", "Shami", "Rahul", "Agarwal"]

    students = []
    for index in range(count):
        batch_index = rng.randrange(len(batches))
        name = f"{rng.choice(first_names)} {rng.choice(last_names)}"
        semester = rng.randint(1, 8)
        # Only final-semester students can already be alumni
        statuses = ["active", "inactive", "alumni"] if semester > 7 else ["active", "inactive"]
        students.append({
            "id": f"STU{1000 + index}",
            "enrollmentNo": f"EN{2020 + batch_index}{100 + index}",
            "name": name,
            "email": f"{name.lower().replace(' ', '.')}@student.edu",
            "phone": f"+91 {rng.randint(6000000000, 9999999999)}",
            "address": _address(rng),
            "section": rng.choice(SECTIONS),
            "batch": batches[batch_index],
            "department": rng.choice(DEPARTMENT_NAMES),
            "academicDetails": {
                "currentSemester": semester,
                "cgpa": round(rng.uniform(6, 10), 2),
                "attendance": rng.randint(70, 99),
            },
            "status": rng.choice(statuses),
        })
    return students


def generate_mock_schedules(count: int, rng: Optional[random.Random] = None) -> List[Record]:
    rng = rng or random.Random()
    faculty = [(c["facultyId"], c["facultyName"]) for c in MOCK_COURSES]
    courses = [(c["id"], c["name"]) for c in MOCK_COURSES]
    days = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

    schedules = []
    for index in range(count):
        faculty_id, faculty_name = rng.choice(faculty)
        course_id, course_name = rng.choice(courses)
        hour = rng.randint(9, 17)
        minute = rng.choice([0, 30])
        # Classes end by 18:00
        end_hour = min(hour + rng.choice([1, 2]), 18)
        schedules.append({
            "id": f"SCH{1000 + index}",
            "facultyId": faculty_id,
            "facultyName": faculty_name,
            "day": rng.choice(days),
            "startTime": f"{hour:02d}:{minute:02d}",
            "endTime": f"{end_hour:02d}:{minute if end_hour < 18 else 0:02d}",
            "courseId": course_id,
            "courseName": course_name,
            "batchName": rng.choice(BATCH_NAMES),
            "section": rng.choice(SECTIONS),
            "roomNumber": f"{rng.randint(1, 5)}{rng.randint(1, 100)}",
            "type": rng.choice(["Lecture", "Lab", "Tutorial"]),
        })
    return schedules


def initialize_data(connector: ConnectorService, rng: Optional[random.Random] = None) -> None:
    """Create the shared collections and fill the empty ones with demo data."""
    rng = rng or random.Random()
    connector.initialize_if_empty()

    seeds = [
        (connector.departments, lambda: MOCK_DEPARTMENTS),
        (connector.faculty, lambda: generate_mock_faculty(30, rng)),
        (connector.students, lambda: generate_mock_students(50, rng)),
        (connector.courses, lambda: MOCK_COURSES),
        (connector.batches, lambda: MOCK_BATCHES),
        (connector.schedules, lambda: generate_mock_schedules(50, rng)),
    ]
    for collection, build in seeds:
        if collection.get_all():
            continue
        records = build()
        for record in records:
            collection.create(record)
        print(f"💾 Seeded {len(records)} {collection.data_type}")
