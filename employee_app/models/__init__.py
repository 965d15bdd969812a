from .department import Department
from .employee import Employee
