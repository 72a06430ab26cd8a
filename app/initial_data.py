import logging

from app.core.database import SessionLocal
from app.crud import crud_tool, crud_tool_category
from app.schemas import tool as schemas_tool, tool_category as schemas_tool_category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {
        "name": "PDF Tools",
        "slug": "pdf-tools",
        "icon": "fas fa-file-pdf",
        "description": "Merge, split, compress and convert PDF documents",
        "color": "#ef4444",
    },
    {
        "name": "Image Tools",
        "slug": "image-tools",
        "icon": "fas fa-image",
        "description": "Resize, enhance and convert images",
        "color": "#8b5cf6",
    },
    {
        "name": "AI Writing",
        "slug": "ai-writing",
        "icon": "fas fa-pen-nib",
        "description": "Generate and rewrite text with AI",
        "color": "#10b981",
    },
    {
        "name": "Code Tools",
        "slug": "code-tools",
        "icon": "fas fa-code",
        "description": "Generate, format and explain source code",
        "color": "#3b82f6",
    },
]

# Keyed by category slug
DEFAULT_TOOLS = {
    "pdf-tools": [
        {
            "name": "PDF Merger",
            "slug": "pdf-merger",
            "short_description": "Combine multiple PDFs into one",
            "description": "Merge several PDF files into a single document in the order you choose.",
            "icon": "fas fa-object-group",
            "tags": ["pdf", "merge"],
        },
        {
            "name": "PDF Compressor",
            "slug": "pdf-compressor",
            "short_description": "Shrink PDF file size",
            "description": "Reduce the size of PDF files while keeping them readable.",
            "icon": "fas fa-compress",
            "tags": ["pdf", "compress"],
        },
    ],
    "image-tools": [
        {
            "name": "Image Enhancer",
            "slug": "image-enhancer",
            "short_description": "Sharpen and color-correct photos",
            "description": "Improve saturation and contrast of any photo in one click.",
            "icon": "fas fa-magic",
            "is_premium": True,
            "tags": ["image", "enhance"],
        },
        {
            "name": "Image Resizer",
            "slug": "image-resizer",
            "short_description": "Resize images to any dimension",
            "description": "Resize and crop images for social media, web or print.",
            "icon": "fas fa-expand",
            "tags": ["image", "resize"],
        },
    ],
    "ai-writing": [
        {
            "name": "Blog Post Writer",
            "slug": "blog-post-writer",
            "short_description": "Draft blog posts from a topic",
            "description": "Generate a structured blog post draft from a short topic description.",
            "icon": "fas fa-feather",
            "is_premium": True,
            "tags": ["ai", "writing"],
        },
        {
            "name": "Text Summarizer",
            "slug": "text-summarizer",
            "short_description": "Summarize long text",
            "description": "Condense long articles and documents into a short summary.",
            "icon": "fas fa-align-left",
            "tags": ["ai", "summary"],
        },
    ],
    "code-tools": [
        {
            "name": "Code Generator",
            "slug": "code-generator",
            "short_description": "Generate code from a description",
            "description": "Describe a function and get working code in the language of your choice.",
            "icon": "fas fa-terminal",
            "tags": ["code", "ai"],
        },
    ],
}


def create_initial_data():
    db = SessionLocal()
    try:
        if crud_tool_category.get_tool_categories(db):
            logger.info("Catalog already populated, skipping seed")
            return

        for category_data in DEFAULT_CATEGORIES:
            logger.info(f"Creating category {category_data['slug']}...")
            category = crud_tool_category.create_tool_category(
                db, schemas_tool_category.ToolCategoryCreate(**category_data)
            )
            for tool_data in DEFAULT_TOOLS.get(category.slug, []):
                crud_tool.create_tool(db, schemas_tool.ToolCreate(category_id=category.id, **tool_data))
    finally:
        db.close()
