TITLE_MAX = 100
QUESTION_MAX = 300
LIST_PREVIEW_MAX = 40
DESCRIPTION_PREVIEW_MAX = 500

USAGE = {
    'addrecord': "/addrecord title | description",
    'editrecord': "/editrecord &lt;id&gt; title | description",
    'delrecord': "/delrecord &lt;id&gt;",
    'addcard': "/addcard &lt;record_id&gt; question | answer",
    'editcard': "/editcard &lt;id&gt; question | answer",
    'delcard': "/delcard &lt;id&gt;",
    'cards': "/cards &lt;record_id&gt;",
}
