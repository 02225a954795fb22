"""Compile Haml-style templates into Handlebars/Ember template registrations."""
