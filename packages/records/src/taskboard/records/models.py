"""项目跟踪记录模型

四个实体：Client、Project、TaskRecord、Employee。
外键关系：Project -> Client，TaskRecord -> Project，Employee -> TaskRecord。
只是数据定义，与 taskboard.core 的任务组合树没有行为上的关联。
"""

from datetime import date

from pydantic import BaseModel, Field


class Client(BaseModel):
    """客户（以 CNPJ 为主键）"""

    cnpj: int = Field(description="主键，企业税号")
    name: str = Field(max_length=255)
    address: str = Field(max_length=255)
    phone: str = Field(max_length=255)
    contact_person: str = Field(max_length=255, description="客户方负责人")
    email: str = Field(max_length=255)


class Project(BaseModel):
    """项目"""

    project_id: int = Field(description="主键")
    manager: str = Field(max_length=255, description="项目负责人")
    start_date: date
    end_date: date
    description: str = Field(max_length=255)
    client_cnpj: int = Field(description="外键 -> Client.cnpj")


class TaskRecord(BaseModel):
    """项目任务记录"""

    record_id: int = Field(description="主键")
    name: str = Field(max_length=255)
    hours: int = Field(description="工时")
    assignee: str = Field(max_length=255, description="负责员工")
    project_id: int = Field(description="外键 -> Project.project_id")


class Employee(BaseModel):
    """员工（以工号为主键）"""

    registration: int = Field(description="主键，工号")
    name: str = Field(max_length=255)
    role: str = Field(max_length=255, description="职位")
    phone: str = Field(max_length=255)
    email: str = Field(max_length=255)
    task_record_id: int = Field(description="外键 -> TaskRecord.record_id")
