from .blog_posts import BlogPost
