def render(context):
    return '<section class="hero hero--front"></section>\n'
