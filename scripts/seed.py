"""Seed script for sample portfolio content."""

import asyncio

from portfolio_service.database import MongoDatabase
from portfolio_service.models import AboutCreate, ProjectCreate, SkillCreate
from portfolio_service.repositories import (
    AboutRepository,
    ProjectRepository,
    SkillRepository,
)


async def seed_data():
    """Replace the store contents with sample records."""
    database = await MongoDatabase.connect()

    for repo in (AboutRepository, ProjectRepository, SkillRepository):
        await database[repo.collection_name].delete_many({})
    print("🧹 Cleared existing data")

    await AboutRepository.create(AboutCreate(
        title="Your Name",
        subtitle="Full-Stack Developer",
        description="I build web applications with a focus on clean APIs and fast interfaces.",
        image="/default-about.jpg",
    ))
    print("🙋 Created about record")

    projects = [
        ProjectCreate(
            title="Portfolio Website",
            subtitle="Personal site with an admin dashboard",
            description="A modern portfolio website featuring responsive design and smooth animations.",
            image="/projects/portfolio.png",
        ),
        ProjectCreate(
            title="E-commerce Platform",
            subtitle="Full-stack store",
            description="A full-stack e-commerce platform with user authentication, product management, and payment integration.",
            image="/projects/ecommerce.png",
        ),
        ProjectCreate(
            title="Task Management App",
            subtitle="Team collaboration tool",
            description="A collaborative task management application with real-time updates and team features.",
            image="/projects/taskmanager.png",
        ),
    ]
    for project in projects:
        await ProjectRepository.create(project)
    print(f"📁 Created {len(projects)} projects")

    skills = [
        SkillCreate(name="Python", level=90, category="Languages", image="/skills/python.svg"),
        SkillCreate(name="TypeScript", level=80, category="Languages", image="/skills/typescript.svg"),
        SkillCreate(name="FastAPI", level=85, category="Frameworks", image="/skills/fastapi.svg"),
        SkillCreate(name="MongoDB", level=75, category="Databases", image="/skills/mongodb.svg"),
    ]
    for skill in skills:
        await SkillRepository.create(skill)
    print(f"🎯 Created {len(skills)} skills")

    await MongoDatabase.disconnect()
    print("\n✅ Seed data created successfully!")


if __name__ == "__main__":
    asyncio.run(seed_data())
