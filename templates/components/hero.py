def render(context):
    return '<section class="hero" data-subject="%s"></section>\n' % (context["subject_id"],)
