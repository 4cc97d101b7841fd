from typing import List
from sales_console.schemas.records import Sale, Salesperson

# Seed data for the local-only mock rosters. Never sent to the record service.

def mock_salespeople() -> List[Salesperson]:
    return [
        Salesperson(id=1, first_name="John", last_name="Doe", department="Electronics", hire_date="2020-01-15", salary=60000),
        Salesperson(id=2, first_name="Jane", last_name="Smith", department="Furniture", hire_date="2019-03-22", salary=55000),
        Salesperson(id=3, first_name="Emily", last_name="Johnson", department="Clothing", hire_date="2021-07-30", salary=50000),
        Salesperson(id=4, first_name="Michael", last_name="Brown", department="Sports", hire_date="2018-11-12", salary=65000),
    ]

def mock_sales() -> List[Sale]:
    return [
        Sale(id=1, customer_first_name="Alice B.", customer_last_name="TechCorp", date="2023-10-01", total=100000, salesperson_id=3),
        Sale(id=2, customer_first_name="Bob C.", customer_last_name="InnovateLtd", date="2023-10-05", total=150000, salesperson_id=4),
        Sale(id=3, customer_first_name="Charlie D.", customer_last_name="SolutionsInc", date="2023-10-10", total=200000, salesperson_id=1),
        Sale(id=4, customer_first_name="Diana E.", customer_last_name="FutureWorks", date="2023-10-12", total=175000, salesperson_id=2),
        Sale(id=5, customer_first_name="Ethan F.", customer_last_name="NextGen", date="2023-10-14", total=225000, salesperson_id=3),
        Sale(id=6, customer_first_name="Gloria N.", customer_last_name="Excelsis", date="2023-10-15", total=250000, salesperson_id=1),
    ]
