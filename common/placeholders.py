"""
Placeholder section documents used to seed an empty data directory.
Every document here passes its section schema.
"""

LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat."
)

PLACEHOLDER_DATA = {
    "personalInfo": {
        "name": "Your Name",
        "title": "Software Developer",
        "location": "Your City, Country",
        "bio": LOREM_IPSUM
    },
    "about": {
        "content": LOREM_IPSUM
    },
    "skills": {
        "skillCategories": {
            "Frontend": [
                {"name": "React", "level": "intermediate"},
                {"name": "JavaScript", "level": "advanced"},
                {"name": "HTML/CSS", "level": "advanced"}
            ],
            "Backend": [
                {"name": "Node.js", "level": "intermediate"},
                {"name": "Express", "level": "intermediate"}
            ],
            "Database": [
                {"name": "MongoDB", "level": "intermediate"},
                {"name": "PostgreSQL", "level": "intermediate"}
            ]
        }
    },
    "experience": {
        "jobs": [
            {
                "title": "Software Developer",
                "company": "Your Company",
                "startDate": "2023-01",
                "endDate": None,
                "isCurrent": True,
                "location": "remote",
                "country": "Your Country",
                "city": "Your City",
                "description": "Description 1",
                "achievements": ["Achievement 1", "Achievement 2", "Achievement 3"],
                "skills": ["React", "Node.js", "JavaScript", "Git"]
            }
        ]
    },
    "projects": {
        "projects": [
            {
                "name": "Portfolio Website",
                "description": "A personal portfolio website built with modern web technologies. "
                               "Features include responsive design, dynamic content management, "
                               "and contact forms.",
                "image": "https://picsum.photos/300/200",
                "github": "https://github.com/yourusername/portfolio",
                "technologies": ["React", "Node.js", "Express", "MongoDB"]
            },
            {
                "name": "Application Name",
                "description": "Description 2",
                "image": "https://picsum.photos/300/200",
                "github": "https://github.com/yourusername/applicationname",
                "technologies": ["React", "Socket.io", "Express", "PostgreSQL"]
            }
        ]
    },
    "contact": {
        "email": "your.email@example.com",
        "phone": "+1 (555) 123-4567",
        "socialLinks": [
            {"platform": "github", "url": "https://github.com/yourusername"},
            {"platform": "linkedin", "url": "https://www.linkedin.com/in/yourusername/"}
        ]
    },
    "education": {
        "degrees": [
            {
                "degree": "Bachelor's Degree",
                "school": "University Name",
                "field": "Computer Science",
                "startDate": "2019-09",
                "endDate": "2023-05",
                "description": "Relevant coursework and projects..."
            }
        ]
    }
}
