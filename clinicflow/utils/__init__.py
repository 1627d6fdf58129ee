"""
Pure helpers shared by the store, the routes and the PDF renderer.
"""
