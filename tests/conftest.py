import pytest

from models import Record


def make_record(person_id, name, surname="X", age=30, birth_date="1990-01-01", parent_id=0):
    return Record(
        id=person_id,
        name=name,
        surname=surname,
        age=age,
        birth_date=birth_date,
        parent_id=parent_id,
    )


# Two trees plus a person whose parent ID is never seen:
#
# 1 A X              7 G W          9 I Q (parent 99)
# ├── 2 B Y          └── 8 H W
# │   ├── 4 D Y
# │   └── 5 E Y
# └── 3 C Z
#     └── 6 F Z
FAMILY_RECORDS = [
    make_record(1, "A", "X", 70, "1950-03-01"),
    make_record(2, "B", "Y", 45, "1975-06-15", parent_id=1),
    make_record(3, "C", "Z", 40, "1980-09-30", parent_id=1),
    make_record(4, "D", "Y", 20, "2000-01-01", parent_id=2),
    make_record(5, "E", "Y", 18, "2002-02-02", parent_id=2),
    make_record(6, "F", "Z", 10, "2010-10-10", parent_id=3),
    make_record(7, "G", "W", 60, "1960-05-05"),
    make_record(8, "H", "W", 30, "1990-07-07", parent_id=7),
    make_record(9, "I", "Q", 5, "2015-12-12", parent_id=99),
]

FAMILY_CSV = """id,name,surname,age,birthDate,parentId
1,A,X,70,1950-03-01,0
2,B,Y,45,1975-06-15,1
3,C,Z,40,1980-09-30,1
4,D,Y,20,2000-01-01,2
5,E,Y,18,2002-02-02,2
6,F,Z,10,2010-10-10,3
7,G,W,60,1960-05-05,0
8,H,W,30,1990-07-07,7
9,I,Q,5,2015-12-12,99
"""


@pytest.fixture
def family_records():
    return list(FAMILY_RECORDS)


@pytest.fixture
def family_csv(tmp_path):
    path = tmp_path / "familydb.csv"
    path.write_text(FAMILY_CSV, encoding="utf-8")
    return path
