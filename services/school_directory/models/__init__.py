from .schools import (
    BoardingSchool,
    SchoolSport,
    SchoolScholarship,
    SportType,
    ScholarshipType,
    Region,
    CostRange,
)
